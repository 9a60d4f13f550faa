"""Speech Settings - Environment-based configuration.

Uses Pydantic Settings for validation and type coercion. Variables are
read with the SPEECH_ prefix (SPEECH_ID, SPEECH_KEY, SPEECH_REGION, ...)
and from a local .env file.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from speech.config.constants import SPEECH
from speech.speaker import Credentials


class SpeechSettings(BaseSettings):
    """Speech settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SPEECH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Backend selection
    provider: Literal["polly-v1", "polly-v2"] = Field(
        default=SPEECH.DEFAULT_PROVIDER, description="Speaker backend"
    )

    # Credentials
    id: str = Field(default="", description="Client/access key id")
    key: str = Field(default="", description="Secret access key")
    session_token: str | None = Field(
        default=None, description="Session token for temporary credentials"
    )

    # Session configuration
    region: str = Field(default=SPEECH.DEFAULT_REGION, description="Vendor region")
    output_format: str = Field(
        default=SPEECH.DEFAULT_OUTPUT_FORMAT,
        description="Output format (pcm, mp3, ogg, json)",
    )
    sample_rate: int = Field(
        default=SPEECH.DEFAULT_SAMPLE_RATE,
        ge=8000,
        le=48000,
        description="Output sample rate in Hz",
    )
    engine: str | None = Field(
        default=None, description="Polly engine (standard, neural, ...); V2 only"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    log_json: bool = Field(default=True, description="Render logs as JSON")

    @field_validator("region")
    @classmethod
    def validate_region(cls, v: str) -> str:
        """Region must not be blank."""
        if not v.strip():
            raise ValueError("region must not be empty")
        return v.strip()

    @field_validator("output_format")
    @classmethod
    def lower_output_format(cls, v: str) -> str:
        """Format tokens are lower case."""
        return v.strip().lower()

    def credentials(self) -> Credentials:
        """Credentials built from SPEECH_ID and SPEECH_KEY."""
        return Credentials(
            client_id=self.id,
            keys=[self.key] if self.key else [],
            session_token=self.session_token,
        )


@lru_cache
def get_settings() -> SpeechSettings:
    """Get cached settings instance."""
    return SpeechSettings()
