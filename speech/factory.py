"""Speaker Factory - Build speakers by provider name.

Usage:
    from speech import create_speaker

    speaker = create_speaker("polly-v2", creds, "eu-west-2", "mp3", 22050)

    # Or from SPEECH_* environment variables
    speaker = create_speaker_from_settings()
"""

from __future__ import annotations

from typing import Any, Literal

from speech.config.constants import SPEECH
from speech.config.settings import SpeechSettings, get_settings
from speech.exceptions import InvalidParameterError
from speech.observability.logging import configure_logging, get_logger
from speech.speaker import Credentials, Speaker, Spoken

logger = get_logger(__name__)

ProviderType = Literal["polly-v1", "polly-v2"]

_PROVIDERS = ("polly-v1", "polly-v2")


def create_speaker(
    provider: ProviderType,
    credentials: Credentials,
    region: str,
    output_format: str,
    sample_rate: int,
    **kwargs: Any,
) -> Speaker:
    """Create a speaker session.

    Args:
        provider: Backend name ('polly-v1', 'polly-v2')
        credentials: Service credentials
        region: Vendor region
        output_format: Output format (pcm, mp3, ogg, json)
        sample_rate: Sample rate in Hz
        **kwargs: Backend-specific options (engine, speech_marks, transport,
            client_config)

    Returns:
        Configured speaker

    Raises:
        InvalidParameterError: Unknown provider or session parameter
        MissingCredentialsError: Incomplete credentials
    """
    if provider == "polly-v1":
        from speech.polly.v1 import PollySpeakerV1

        return PollySpeakerV1(credentials, region, output_format, sample_rate, **kwargs)

    if provider == "polly-v2":
        from speech.polly.v2 import PollySpeakerV2

        return PollySpeakerV2(credentials, region, output_format, sample_rate, **kwargs)

    raise InvalidParameterError("provider", provider)


def create_speaker_from_settings(
    settings: SpeechSettings | None = None,
    **kwargs: Any,
) -> Speaker:
    """Create a speaker configured by SpeechSettings.

    Also applies the settings' log level and renderer.
    """
    settings = settings or get_settings()
    configure_logging(level=settings.log_level, json_format=settings.log_json)
    if settings.engine and settings.provider == "polly-v2":
        kwargs.setdefault("engine", settings.engine)
    elif settings.engine:
        logger.warning(
            "speech_engine_ignored",
            provider=settings.provider,
            engine=settings.engine,
        )
    return create_speaker(
        settings.provider,
        settings.credentials(),
        settings.region,
        settings.output_format,
        settings.sample_rate,
        **kwargs,
    )


def speak(
    text: str,
    rate: str,
    locale: str,
    voice: str,
    credentials: Credentials,
    region: str = SPEECH.DEFAULT_REGION,
) -> Spoken:
    """Speak text once, as 16kHz PCM, with a throwaway V2 session."""
    speaker = create_speaker(
        "polly-v2",
        credentials,
        region,
        SPEECH.DEFAULT_OUTPUT_FORMAT,
        SPEECH.DEFAULT_SAMPLE_RATE,
    )
    return speaker.speak(text, rate, locale, voice)


def get_available_providers() -> list[str]:
    """Get list of provider names create_speaker accepts."""
    return list(_PROVIDERS)
