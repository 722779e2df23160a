#!/usr/bin/env python
"""CLI for the generative AI news feed."""

import argparse
import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, field_validator

from genai_news.config import create_from_config, get_default_config_path, load_config
from genai_news.data import NewsArticle
from genai_news.trigger import AuthGatedTrigger, StaticAuthProvider

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    config: Path
    user: str | None = "local"
    log: bool = False
    log_dir: str = "logs"

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def _format_date(published_at: str) -> str:
    try:
        return datetime.fromisoformat(published_at.replace("Z", "+00:00")).strftime("%Y/%m/%d")
    except ValueError:
        # Search providers often return relative dates ("2 hours ago")
        return published_at


def _log_article(index: int, article: NewsArticle) -> None:
    logger.info(f"\n{index}. {article.title}")
    logger.info(f"   {article.source} • {_format_date(article.published_at)} • {article.url}")
    if article.image_url:
        logger.info(f"   画像: {article.image_url}")
    logger.info("\n原文:")
    logger.info(article.original_text)
    logger.info("\n日本語翻訳:")
    logger.info(article.translated_text)


async def run(args: CLIArgs) -> int:
    """Refresh the feed once and print the batch.

    Args:
        args: Validated CLI arguments.

    Returns:
        Process exit code.
    """
    config = load_config(args.config)
    feed, run_logger = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )

    provider = StaticAuthProvider(user=args.user)
    trigger = AuthGatedTrigger(feed, provider)
    trigger.start()
    try:
        await trigger.wait()
    finally:
        trigger.close()

    if feed.user is None:
        logger.info("生成AI最新情報")
        logger.info("ログインしてニュースを表示します")
        return 1

    logger.info("生成AI最新情報 - 最新の生成AI技術ニュースと情報")
    if feed.error:
        logger.error(feed.error)
        logger.error("サンプルデータを表示しています")

    if not feed.articles:
        logger.info("記事が見つかりませんでした")

    for i, article in enumerate(feed.articles, 1):
        _log_article(i, article)

    usage = feed.last_usage
    logger.info("\n--- Usage Summary ---")
    logger.info(f"Search requests: {usage.search_requests}")
    logger.info(f"Extraction requests: {usage.extraction_requests}")
    logger.info(f"Generation calls: {len(usage.api_calls)}")
    logger.info(f"Input tokens: {usage.input_tokens:,}")
    logger.info(f"Output tokens: {usage.output_tokens:,}")

    if run_logger and run_logger.last_log_path:
        logger.info(f"\nRun log written to: {run_logger.last_log_path}")
    return 0


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Fetch generative AI news and translate it to Japanese."
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--user",
        type=str,
        default="local",
        help="Signed-in user name; pass an empty string for an anonymous session",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Enable intermediate pipeline logging to JSON file",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            config=config_path,
            user=ns.user or None,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        sys.exit(asyncio.run(run(args)))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
