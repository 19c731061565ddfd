#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from typing import List, Optional
from pydantic_settings import BaseSettings

from .constants import (
    DEFAULT_CLAUDE_MODEL,
    DEFAULT_OPENAI_MODEL,
    DEFAULT_DEEPSEEK_MODEL,
    DEEPSEEK_BASE_URL,
    HIGH_QUALITY_REGIONAL_LOCALES,
    SUPPORTED_LOCALES,
    PROVIDER_TIMEOUT_SECONDS,
    PROVIDER_MAX_RETRIES,
    PROVIDER_RETRY_BASE_DELAY,
    QUALITY_CHECK_TIMEOUT,
    MAX_CONCURRENT_LOCALES,
    GLOSSARY_DIR,
    ANALYTICS_DIR,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # ========== API Keys ==========
    anthropic_api_key: str = ""
    openai_api_key: str = ""
    deepseek_api_key: str = ""

    # ========== Models ==========
    claude_model: str = DEFAULT_CLAUDE_MODEL
    openai_model: str = DEFAULT_OPENAI_MODEL
    deepseek_model: str = DEFAULT_DEEPSEEK_MODEL
    deepseek_base_url: str = DEEPSEEK_BASE_URL

    # ========== Routing ==========
    # Locales routed to the high-quality regional provider
    regional_locales: List[str] = list(HIGH_QUALITY_REGIONAL_LOCALES)
    supported_locales: List[str] = list(SUPPORTED_LOCALES)

    # ========== Performance ==========
    max_concurrency: int = MAX_CONCURRENT_LOCALES
    provider_timeout: float = PROVIDER_TIMEOUT_SECONDS
    provider_max_retries: int = PROVIDER_MAX_RETRIES
    retry_base_delay: float = PROVIDER_RETRY_BASE_DELAY
    quality_check_timeout: float = QUALITY_CHECK_TIMEOUT

    # ========== Features ==========
    show_progress: bool = False
    preserve_formatting: bool = True

    # ========== Directories / Files ==========
    glossary_dir: Path = BASE_DIR / GLOSSARY_DIR
    market_config_file: Optional[Path] = None  # JSON overrides for the market table
    analytics_dir: Path = BASE_DIR / ANALYTICS_DIR
    review_queue_db: Optional[Path] = None  # None keeps the review queue in memory

    class Config:
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    def get_api_key(self, provider: str) -> str:
        """Get API key for a provider name ("claude", "openai", "deepseek")"""
        keys = {
            "claude": self.anthropic_api_key,
            "openai": self.openai_api_key,
            "deepseek": self.deepseek_api_key,
        }
        if provider not in keys:
            raise ValueError(f"Unsupported provider: {provider}")
        return keys[provider]


# Global settings instance
settings = Settings()
