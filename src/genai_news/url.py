"""URL handling utilities."""

import logging
from urllib.parse import urlparse

logger = logging.getLogger(__name__)


def extract_domain(url: str) -> str:
    """Extract the domain name from a URL, used as a fallback source label.

    Args:
        url: The URL to extract the domain from.

    Returns:
        The domain (without 'www.' prefix), or "Web" if extraction fails.
    """
    try:
        domain = urlparse(url).netloc
    except ValueError:
        return "Web"
    if not domain:
        logger.warning(f"Could not get domain from url {url}")
        return "Web"
    if domain.startswith("www."):
        domain = domain[4:]
    return domain
