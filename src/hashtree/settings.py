from __future__ import annotations
import logging
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .crypto import DEFAULT_ALGORITHM, resolve_algorithm


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore", populate_by_name=True
    )

    # One of crypto.ALLOWED_ALGORITHMS; roots only compare under the same one
    hash_algorithm: str = Field(
        default=DEFAULT_ALGORITHM, alias="HASHTREE_HASH_ALGORITHM"
    )

    log_level: str = Field(default="INFO", alias="HASHTREE_LOG_LEVEL")

    # Hex digests in log messages are cut to this many characters (0 = off)
    log_digest_chars: int = Field(default=12, ge=0, alias="HASHTREE_LOG_DIGEST_CHARS")

    @field_validator("hash_algorithm")
    @classmethod
    def _known_algorithm(cls, v: str) -> str:
        return resolve_algorithm(v)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level


settings = Settings()  # load at import
