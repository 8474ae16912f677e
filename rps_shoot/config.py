"""Application configuration using Pydantic Settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rps_shoot.constants import MIN_KEY_BYTES


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, env_prefix="RPS_"
    )

    # Commitment
    key_bytes: int = MIN_KEY_BYTES

    # Console
    show_banner: bool = True
    banner: str = "~~~ Rock Paper Scissors Shoot ~~~"

    @field_validator("key_bytes")
    @classmethod
    def _key_bytes_floor(cls, value: int) -> int:
        """Secret keys are never shorter than 256 bits."""
        if value < MIN_KEY_BYTES:
            raise ValueError(f"key_bytes must be at least {MIN_KEY_BYTES}")
        return value


# Global settings instance
settings = Settings()
