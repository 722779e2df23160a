"""Core data models for genai-news."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SearchResult:
    """A raw news search hit, as returned by a search service.

    Only ``title`` and ``link`` are guaranteed; every other field may be
    missing depending on the provider.
    """

    title: str
    link: str
    snippet: str = ""
    description: str | None = None
    source: str | None = None
    displayed_link: str | None = None
    date: str | None = None
    thumbnail: str | None = None


@dataclass(frozen=True)
class NewsArticle:
    """A processed article ready for display."""

    id: str
    title: str
    original_text: str
    translated_text: str
    published_at: str
    source: str
    url: str
    summary: str = ""
    image_url: str | None = None


@dataclass(frozen=True)
class GeneratedText:
    """Text returned by a text generation service."""

    text: str
    model: str = ""
    input_tokens: int = 0
    output_tokens: int = 0


@dataclass(frozen=True)
class APICallUsage:
    """Usage from a single generation call."""

    model: str
    input_tokens: int = 0
    output_tokens: int = 0


@dataclass
class Usage:
    """Accumulated external service usage across a pipeline run."""

    api_calls: list[APICallUsage] = field(default_factory=list)
    search_requests: int = 0
    extraction_requests: int = 0

    @property
    def input_tokens(self) -> int:
        return sum(c.input_tokens for c in self.api_calls)

    @property
    def output_tokens(self) -> int:
        return sum(c.output_tokens for c in self.api_calls)

    def __add__(self, other: "Usage") -> "Usage":
        return Usage(
            api_calls=self.api_calls + other.api_calls,
            search_requests=self.search_requests + other.search_requests,
            extraction_requests=self.extraction_requests + other.extraction_requests,
        )

    def __iadd__(self, other: "Usage") -> "Usage":
        self.api_calls.extend(other.api_calls)
        self.search_requests += other.search_requests
        self.extraction_requests += other.extraction_requests
        return self


@dataclass(frozen=True)
class FetchOutcome:
    """Result of one feed refresh.

    ``error`` carries the user-facing message when the pipeline failed and
    ``articles`` holds the sample batch instead.
    """

    articles: list[NewsArticle]
    error: str | None = None
    used_fallback: bool = False
    usage: Usage = field(default_factory=Usage)
