"""Speech Constants - Defaults and accepted values for Polly sessions.

The locale, voice and output format sets are not listed here: they are
read from the vendor's service model at runtime, because they change
independently of this package.
"""

from dataclasses import dataclass, field
from typing import Final


@dataclass(frozen=True)
class SpeechConstants:
    """Immutable session defaults.

    Sample rates are in Hz. Formats missing from SAMPLE_RATES accept any
    rate locally and are left to the service to check.
    """

    DEFAULT_REGION: Final[str] = "eu-west-2"
    DEFAULT_PROVIDER: Final[str] = "polly-v2"
    DEFAULT_OUTPUT_FORMAT: Final[str] = "pcm"
    DEFAULT_SAMPLE_RATE: Final[int] = 16000

    OGG_VORBIS: Final[str] = "ogg_vorbis"
    OGG_SYNONYMS: Final[frozenset[str]] = frozenset({"ogg", "oggvorbis", "ogg-vorbis"})
    # returns speech marks, not audio
    SPEECH_MARKS_FORMAT: Final[str] = "json"
    DEFAULT_SPEECH_MARKS: Final[tuple[str, ...]] = ("sentence", "word")

    SAMPLE_RATES: Final[dict[str, tuple[int, ...]]] = field(
        default_factory=lambda: {
            "mp3": (8000, 16000, 22050, 24000),
            "ogg_vorbis": (8000, 16000, 22050, 24000),
            "pcm": (8000, 16000),
        }
    )

    TEXT_TYPE_SSML: Final[str] = "ssml"


# Singleton instance for import convenience
SPEECH = SpeechConstants()
