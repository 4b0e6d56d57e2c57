"""Library configuration via environment variables.

Provides type-safe settings loading using pydantic-settings.
Environment variables can be loaded from a .env file.

Environment Variables:
    MULTIPART_RELATED_LOG_LEVEL: Logging level (default INFO)
    MULTIPART_RELATED_LOG_JSON_FORMAT: Emit JSON log lines (default True)
    MULTIPART_RELATED_BOUNDARY_PREFIX: Prefix for generated boundaries
    MULTIPART_RELATED_LINE_SEPARATOR: "crlf" (default) or "lf"
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Generated boundaries append a 32 character UUID hex; RFC 2046 caps boundaries at 70
MAX_BOUNDARY_PREFIX_LENGTH = 38

LINE_SEPARATORS = {
    "crlf": "\r\n",
    "lf": "\n",
}


class Settings(BaseSettings):
    """Library settings loaded from environment variables.

    All settings have defaults suitable for RFC-conformant output.
    The domain layer never reads settings directly; only boundary
    generation, the stdlib codec adapter and logging setup do.
    """

    model_config = SettingsConfigDict(
        env_prefix="MULTIPART_RELATED_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON_FORMAT: bool = True

    # Wire format
    BOUNDARY_PREFIX: str = "----=_Part_"
    LINE_SEPARATOR: str = "crlf"

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase"""
        return v.strip().upper()

    @field_validator("BOUNDARY_PREFIX")
    @classmethod
    def check_boundary_prefix(cls, v: str) -> str:
        """Keep generated boundaries within the RFC 2046 length limit"""
        if len(v) > MAX_BOUNDARY_PREFIX_LENGTH:
            raise ValueError(
                f"BOUNDARY_PREFIX must be at most {MAX_BOUNDARY_PREFIX_LENGTH} "
                f"characters (got {len(v)})"
            )
        return v

    @field_validator("LINE_SEPARATOR")
    @classmethod
    def check_line_separator(cls, v: str) -> str:
        """Accept only known line separator names"""
        v = v.strip().lower()
        if v not in LINE_SEPARATORS:
            raise ValueError(
                f"LINE_SEPARATOR must be one of {sorted(LINE_SEPARATORS)} (got {v!r})"
            )
        return v

    @property
    def linesep(self) -> str:
        """Literal line separator used when generating MIME bytes."""
        return LINE_SEPARATORS[self.LINE_SEPARATOR]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache for singleton behavior.
    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
