# graphlearn/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field, field_validator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from graphlearn.common.strings.splitters import csv_to_list, dedupe_keep_order

SUPPORTED_LOCALES = ("en", "uk")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False


class CatalogConfig(BaseModel):
    # CATALOG__CATEGORIES=basics,algorithms
    categories: str = "basics,algorithms,applications,advanced"
    strict_categories: bool = False
    recent_limit: int = Field(3, ge=0, le=50)

    @field_validator("strict_categories", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)

    @computed_field  # type: ignore[misc]
    @property
    def category_ids(self) -> List[str]:
        return dedupe_keep_order([c.lower() for c in csv_to_list(self.categories) if c.lower() != "all"])


class ReviewsConfig(BaseModel):
    backend: str = "memory"  # memory|http
    base_url: str = "http://localhost:8000"
    timeout_sec: float = Field(30.0, gt=0)

    @field_validator("backend", mode="before")
    @classmethod
    def _check_backend(cls, v):
        s = str(v or "memory").strip().lower()
        if s not in {"memory", "http"}:
            raise ValueError(f"unsupported reviews backend: {v!r}")
        return s


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "graphlearn"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Presentation --------
    locale: str = "en"
    date_format: str = "%d.%m.%Y"

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    catalog: CatalogConfig = CatalogConfig()
    reviews: ReviewsConfig = ReviewsConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("locale", mode="before")
    @classmethod
    def _check_locale(cls, v):
        s = str(v or "en").strip().lower()
        if s not in SUPPORTED_LOCALES:
            raise ValueError(f"unsupported locale {v!r}; expected one of {SUPPORTED_LOCALES}")
        return s

    @field_validator("log_level", mode="before")
    @classmethod
    def _check_log_level(cls, v):
        s = str(v or "INFO").strip().upper()
        if s not in LOG_LEVELS:
            raise ValueError(f"unsupported log level {v!r}; expected one of {LOG_LEVELS}")
        return s

    @computed_field  # type: ignore[misc]
    @property
    def is_dev(self) -> bool:
        return self.app_env.lower() == "development"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from graphlearn.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
