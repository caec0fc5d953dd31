"""Library configuration."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_ALGORITHMS = ("HS256", "HS384", "HS512")


class JWTSettings(BaseSettings):
    """Defaults used when builders and parsers are created without arguments.

    Loaded from ``SIMPLEJWT_*`` environment variables or a ``.env`` file.
    """

    # Value of the "typ" header claim
    token_type: str = "JWT"

    # Default signing algorithm, HMAC family only
    algorithm: str = "HS256"

    # Minimum secret length enforced by the default secret policy
    secret_min_length: int = Field(default=12, ge=1)

    # Clock skew tolerance (seconds) for exp / nbf checks on parsed tokens
    leeway: int = Field(default=0, ge=0)

    model_config = SettingsConfigDict(
        env_prefix="SIMPLEJWT_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("algorithm")
    @classmethod
    def _check_algorithm(cls, value: str) -> str:
        value = value.upper()
        if value not in SUPPORTED_ALGORITHMS:
            raise ValueError(
                f"Unsupported algorithm: {value}. Use one of {', '.join(SUPPORTED_ALGORITHMS)}."
            )
        return value


@lru_cache
def get_settings() -> JWTSettings:
    """Get cached settings instance."""
    return JWTSettings()
