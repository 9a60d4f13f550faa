"""Provider-agnostic text-to-speech.

A Speaker hides which vendor and API generation synthesizes the audio,
so applications can migrate between them without touching call sites.
Build one with create_speaker (or a backend class such as
PollySpeakerV2) and assign it to a Speaker.

Usage:
    from speech import Credentials, create_speaker

    creds = Credentials(client_id="AKIA...", keys=["secret"])
    speaker = create_speaker("polly-v2", creds, "eu-west-2", "mp3", 22050)
    with speaker.speak("quando sono stato in Firenze", "medium", "it-IT", "Carla") as spoken:
        audio = spoken.read()
"""

from speech.exceptions import (
    ConfigurationError,
    InvalidParameterError,
    MissingCredentialsError,
    SpeechError,
    StreamReadError,
    SynthesisError,
    UnsupportedFormatError,
    decode_error,
)
from speech.ssml import to_ssml
from speech.speaker import Credentials, Speaker, Spoken
from speech.validation import normalize_format
from speech.config import SPEECH, SpeechSettings, get_settings
from speech.factory import (
    create_speaker,
    create_speaker_from_settings,
    get_available_providers,
    speak,
)

__all__ = [
    # Data model
    "Credentials",
    "Speaker",
    "Spoken",
    # Encoding
    "to_ssml",
    "normalize_format",
    # Factory
    "create_speaker",
    "create_speaker_from_settings",
    "get_available_providers",
    "speak",
    # Configuration
    "SPEECH",
    "SpeechSettings",
    "get_settings",
    # Errors
    "SpeechError",
    "ConfigurationError",
    "MissingCredentialsError",
    "InvalidParameterError",
    "UnsupportedFormatError",
    "SynthesisError",
    "StreamReadError",
    "decode_error",
]
