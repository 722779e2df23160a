"""Tests for data models and URL helpers."""

import pytest

from genai_news.data import APICallUsage, FetchOutcome, SearchResult, Usage
from genai_news.url import extract_domain


def test_search_result_defaults() -> None:
    result = SearchResult(title="t", link="https://example.com")
    assert result.snippet == ""
    assert result.description is None
    assert result.thumbnail is None


def test_search_result_is_frozen() -> None:
    result = SearchResult(title="t", link="https://example.com")
    with pytest.raises(AttributeError):
        result.title = "x"  # type: ignore[misc]


def test_usage_totals() -> None:
    usage = Usage(
        api_calls=[
            APICallUsage(model="a", input_tokens=10, output_tokens=1),
            APICallUsage(model="b", input_tokens=5, output_tokens=2),
        ]
    )
    assert usage.input_tokens == 15
    assert usage.output_tokens == 3


def test_usage_add_returns_new_instance() -> None:
    left = Usage(search_requests=1)
    right = Usage(extraction_requests=2, api_calls=[APICallUsage(model="a")])
    total = left + right
    assert total.search_requests == 1
    assert total.extraction_requests == 2
    assert len(total.api_calls) == 1
    assert left.api_calls == []


def test_usage_iadd_mutates() -> None:
    usage = Usage()
    same = usage
    usage += Usage(search_requests=2)
    assert same.search_requests == 2


def test_fetch_outcome_defaults() -> None:
    outcome = FetchOutcome(articles=[])
    assert outcome.error is None
    assert not outcome.used_fallback
    assert outcome.usage == Usage()


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://www.example.com/path", "example.com"),
        ("https://news.example.co.jp/a", "news.example.co.jp"),
        ("not a url", "Web"),
        ("", "Web"),
    ],
)
def test_extract_domain(url: str, expected: str) -> None:
    assert extract_domain(url) == expected
