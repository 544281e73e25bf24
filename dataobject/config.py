"""
DataObject - engine settings
"""
import hashlib

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings with environment variable support."""

    # Application Info
    APP_VERSION: str = "1.0.0"

    # Digest
    # Any hashlib algorithm with a digest of at least 256 bits:
    #   sha256 (default), sha384, sha512, sha3_256, sha3_512, blake2b, blake2s
    DIGEST_ALGORITHM: str = "sha256"
    HASH_ENCODING: str = "utf-8"

    # Canonical hash string
    VALUE_SEPARATOR: str = ","
    NULL_TOKEN: str = "null"

    model_config = SettingsConfigDict(
        env_prefix="DATAOBJECT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("DIGEST_ALGORITHM")
    @classmethod
    def _check_algorithm(cls, value: str) -> str:
        name = value.strip().lower()
        if name not in hashlib.algorithms_available:
            raise ValueError(f"Unknown digest algorithm '{value}'")
        if hashlib.new(name).digest_size < 32:
            raise ValueError(f"Digest algorithm '{value}' is weaker than 256 bits")
        return name

    @field_validator("VALUE_SEPARATOR", "NULL_TOKEN")
    @classmethod
    def _check_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value


settings = Settings()
