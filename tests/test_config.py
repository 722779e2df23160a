"""Tests for configuration loading and factory functions."""

from __future__ import annotations

from pathlib import Path
from tempfile import NamedTemporaryFile

import pytest
from pydantic import ValidationError

from genai_news.backoff import BackoffExecutor
from genai_news.config import (
    BackoffConfig,
    ClaudeTranslatorConfig,
    ExaExtractorConfig,
    ExaSearcherConfig,
    GNewsSearcherConfig,
    HttpExtractorConfig,
    NewsConfig,
    PipelineSettings,
    SerpApiSearcherConfig,
    create_from_config,
    get_default_config_path,
    load_config,
)
from genai_news.config.factory import (
    create_executor,
    create_extractor,
    create_generator,
    create_pipeline,
    create_searcher,
)
from genai_news.extract import ExaContentExtractor, HttpContentExtractor
from genai_news.feed import NewsFeed
from genai_news.pipeline import AggregationPipeline
from genai_news.search import ExaSearcher, GNewsSearcher, SerpApiSearcher
from genai_news.translate import ClaudeTextGenerator


@pytest.fixture
def api_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SERPAPI_API_KEY", "serp-key")
    monkeypatch.setenv("GNEWS_API_KEY", "gnews-key")
    monkeypatch.setenv("EXA_API_KEY", "exa-key")
    monkeypatch.setenv("CLAUDE_API_KEY", "claude-key")


def _load_yaml(content: str) -> NewsConfig:
    with NamedTemporaryFile(mode="w", suffix=".yaml", delete=False, encoding="utf-8") as f:
        f.write(content)
        f.flush()
        return load_config(Path(f.name))


class TestConfigModels:
    """Tests for Pydantic config models."""

    def test_pipeline_settings_defaults(self) -> None:
        settings = PipelineSettings()
        assert len(settings.queries) == 2
        assert settings.results_per_query == 8
        assert settings.max_articles == 6
        assert settings.extraction_candidates == 3
        assert settings.min_snippet_length == 200
        assert settings.max_content_length == 2000
        assert settings.min_translatable_length == 50
        assert settings.translation_max_tokens == 1000
        assert settings.query_delay == 2.0
        assert settings.translation_delay == 1.5
        assert settings.article_delay == 2.0

    def test_pipeline_settings_reject_negative_delay(self) -> None:
        with pytest.raises(ValidationError):
            PipelineSettings(query_delay=-1)

    def test_backoff_config_defaults(self) -> None:
        config = BackoffConfig()
        assert config.max_retries == 3
        assert config.base_delay == 1.0

    def test_backoff_config_requires_one_attempt(self) -> None:
        with pytest.raises(ValidationError):
            BackoffConfig(max_retries=0)

    def test_root_defaults(self) -> None:
        config = NewsConfig()
        assert isinstance(config.searcher, SerpApiSearcherConfig)
        assert config.searcher.language == "ja"
        assert config.searcher.country == "jp"
        assert isinstance(config.extractor, HttpExtractorConfig)
        assert config.translator.model == "claude-haiku-4-5-20251001"
        assert config.logging.enabled is False

    def test_configs_are_frozen(self) -> None:
        config = BackoffConfig()
        with pytest.raises(ValidationError):
            config.max_retries = 5  # type: ignore[misc]


class TestConfigLoader:
    """Tests for YAML config loading."""

    def test_load_config_selects_components(self) -> None:
        config = _load_yaml(
            """
pipeline:
  queries: ["生成AI"]
  max_articles: 4
  query_delay: 0.5
backoff:
  max_retries: 5
searcher:
  type: gnews
  lang: ja
extractor:
  type: exa
"""
        )
        assert config.pipeline.queries == ("生成AI",)
        assert config.pipeline.max_articles == 4
        assert config.pipeline.query_delay == 0.5
        assert config.pipeline.article_delay == 2.0
        assert config.backoff.max_retries == 5
        assert isinstance(config.searcher, GNewsSearcherConfig)
        assert config.searcher.lang == "ja"
        assert isinstance(config.extractor, ExaExtractorConfig)

    def test_load_empty_file_uses_defaults(self) -> None:
        config = _load_yaml("")
        assert config == NewsConfig()

    def test_unknown_searcher_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _load_yaml("searcher:\n  type: bing\n")

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_get_default_config_path(self) -> None:
        path = get_default_config_path()
        assert path.name == "default.yaml"
        assert "configs" in str(path)

    def test_load_default_config(self) -> None:
        path = get_default_config_path()
        if path.exists():
            config = load_config(path)
            assert config.pipeline == PipelineSettings()
            assert isinstance(config.searcher, SerpApiSearcherConfig)


class TestFactoryFunctions:
    """Tests for component factory functions."""

    def test_create_searchers(self, api_keys: None) -> None:
        assert isinstance(create_searcher(SerpApiSearcherConfig()), SerpApiSearcher)
        assert isinstance(create_searcher(GNewsSearcherConfig(lang="it")), GNewsSearcher)
        assert isinstance(create_searcher(ExaSearcherConfig()), ExaSearcher)

    def test_create_searcher_without_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SERPAPI_API_KEY", raising=False)
        with pytest.raises(ValueError, match="SerpApi API key required"):
            create_searcher(SerpApiSearcherConfig())

    def test_create_extractors(self, api_keys: None) -> None:
        assert isinstance(create_extractor(HttpExtractorConfig()), HttpContentExtractor)
        assert isinstance(create_extractor(ExaExtractorConfig()), ExaContentExtractor)

    def test_create_generator(self, api_keys: None) -> None:
        generator = create_generator(ClaudeTranslatorConfig(model="test-model"))
        assert isinstance(generator, ClaudeTextGenerator)

    def test_create_executor(self) -> None:
        executor = create_executor(BackoffConfig(max_retries=5, base_delay=0.25))
        assert isinstance(executor, BackoffExecutor)
        assert executor.max_retries == 5
        assert executor.base_delay == 0.25

    def test_create_pipeline(self, api_keys: None) -> None:
        config = NewsConfig(pipeline=PipelineSettings(max_articles=3))
        pipeline = create_pipeline(config)
        assert isinstance(pipeline, AggregationPipeline)
        assert pipeline.settings.max_articles == 3

    def test_create_from_config_without_logging(self, api_keys: None) -> None:
        feed, run_logger = create_from_config(NewsConfig())
        assert isinstance(feed, NewsFeed)
        assert run_logger is None

    def test_create_from_config_log_override(self, api_keys: None, tmp_path: Path) -> None:
        feed, run_logger = create_from_config(
            NewsConfig(), log_override=True, log_dir_override=str(tmp_path)
        )
        assert isinstance(feed, NewsFeed)
        assert run_logger is not None
        assert run_logger.enabled
