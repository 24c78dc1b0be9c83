"""Centralized configuration settings."""
from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class KeywordSettings:
    """Settings for keyword candidate extraction and scoring."""
    min_word_length: int = 4  # shorter tokens are discarded
    min_phrase_word_length: int = 3  # each half of a bigram
    min_stem_length: int = 1  # a blocked suffix leaves the word unchanged
    top_n: int = 5

    # Unigram placement boosts
    title_boost: int = 10
    meta_description_boost: int = 5
    h1_boost: int = 8
    h2_boost: int = 6

    # Bigram scoring
    phrase_multiplier: float = 1.5
    phrase_title_boost: int = 15
    phrase_meta_description_boost: int = 10
    phrase_h1_boost: int = 12
    phrase_h2_boost: int = 8


@dataclass
class SeoSettings:
    """Settings for SEO rule thresholds."""
    title_max_length: int = 60
    title_truncate_at: int = 57

    description_min_length: int = 50
    description_max_length: int = 160

    min_content_words: int = 300  # Thin content threshold

    # Confidence of a static analysis
    full_confidence: int = 100
    client_rendered_confidence: int = 40


@dataclass
class BatchSettings:
    """Settings for batch analysis."""
    max_workers: int = 4


@dataclass
class LoggingSettings:
    """Logging settings."""
    level: str = "WARNING"


@dataclass
class APISettings:
    """API-specific settings."""
    max_html_bytes: int = 5 * 1024 * 1024  # 5 MB
    max_batch_documents: int = 50

    # CORS
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass
class Settings:
    """Main application settings container."""
    keywords: KeywordSettings = field(default_factory=KeywordSettings)
    seo: SeoSettings = field(default_factory=SeoSettings)
    batch: BatchSettings = field(default_factory=BatchSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    api: APISettings = field(default_factory=APISettings)

    # Application settings
    debug: bool = False

    def __post_init__(self):
        """Load settings from environment variables."""
        self.debug = os.environ.get("SEO_INSPECTOR_DEBUG", "").lower() in ("true", "1", "yes")

        if log_level := os.environ.get("SEO_INSPECTOR_LOG_LEVEL"):
            self.logging.level = log_level.upper()
        elif self.debug:
            self.logging.level = "DEBUG"

        # Batch overrides
        if max_workers := os.environ.get("SEO_INSPECTOR_MAX_WORKERS"):
            self.batch.max_workers = int(max_workers)

        # Keyword overrides
        if min_length := os.environ.get("SEO_INSPECTOR_MIN_WORD_LENGTH"):
            self.keywords.min_word_length = int(min_length)
        if top_n := os.environ.get("SEO_INSPECTOR_TOP_N"):
            self.keywords.top_n = int(top_n)

        # API overrides
        if cors := os.environ.get("SEO_INSPECTOR_CORS_ORIGINS"):
            self.api.cors_origins = [o.strip() for o in cors.split(",")]
        if max_batch := os.environ.get("SEO_INSPECTOR_MAX_BATCH_DOCUMENTS"):
            self.api.max_batch_documents = int(max_batch)


# Global settings instance
settings = Settings()
