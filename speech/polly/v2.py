"""Polly V2 Speaker - Amazon Polly through a boto3 session.

Locale, voice, output format, speech-mark and engine values are checked
against the service model's enumerations before any request is sent.
"""

from __future__ import annotations

from typing import Any, Sequence

from botocore.config import Config
from botocore.exceptions import BotoCoreError

from speech.config.constants import SPEECH
from speech.exceptions import ConfigurationError, SpeechError
from speech.observability.logging import SpeakerLogger
from speech.polly.errors import to_synthesis_error
from speech.polly.transport import Boto3Transport, PollyTransport
from speech.speaker import Credentials, Spoken
from speech.ssml import to_ssml
from speech.validation import (
    convert_enum,
    convert_format,
    normalize_format,
    optional_enum,
    validate_sample_rate,
)


class PollySpeakerV2:
    """A session that converts text to speech, by calls to speak.

    The language, voice and speaking rate can be different on each call;
    output format, sample rate and engine are fixed for the session.

    Usage:
        speaker = PollySpeakerV2(creds, "eu-west-2", "ogg", 22050)
        spoken = speaker.speak("bonjour, comment ça va?", "medium", "fr-FR", "Lea")
    """

    name = "polly-v2"

    def __init__(
        self,
        credentials: Credentials,
        region: str,
        output_format: str,
        sample_rate: int,
        *,
        engine: str | None = None,
        speech_marks: Sequence[str] | None = None,
        transport: PollyTransport | None = None,
        client_config: Config | None = None,
    ) -> None:
        credentials.validate()
        validate_sample_rate(normalize_format(output_format), sample_rate)

        if transport is None:
            try:
                transport = Boto3Transport(credentials, region, config=client_config)
            except BotoCoreError as e:
                raise ConfigurationError(f"polly session error: {e}") from e

        self._transport = transport
        self._region = region
        self._format = convert_format(output_format, transport.output_formats())
        self._sampling = str(sample_rate)
        self._engine = optional_enum("engine", engine, transport.engines())
        self._speech_marks: tuple[str, ...] = ()
        if self._format == SPEECH.SPEECH_MARKS_FORMAT:
            valid_marks = transport.speech_mark_types()
            self._speech_marks = tuple(
                convert_enum("speech mark type", mark, valid_marks)
                for mark in (speech_marks or SPEECH.DEFAULT_SPEECH_MARKS)
            )

        self._log = SpeakerLogger(self.name, region)
        self._log.session_created(self._format, sample_rate)

    @property
    def region(self) -> str:
        return self._region

    @property
    def output_format(self) -> str:
        return self._format

    @property
    def sample_rate(self) -> int:
        return int(self._sampling)

    @property
    def engine(self) -> str | None:
        return self._engine

    def speak(self, text: str, rate: str, locale: str, voice: str) -> Spoken:
        """Say text at a speaking rate ("medium" or "slow") in a locale with a voice.

        An empty locale selects the voice's default locale.

        Raises:
            InvalidParameterError: locale or voice is not a Polly value
            SynthesisError: Polly rejected the request, or it could not be sent
        """
        loc = optional_enum("locale", locale, self._transport.locales())
        voice_id = convert_enum("voice name", voice, self._transport.voices())

        request = self._build_request(text, rate, loc, voice_id)
        self._log.speak_requested(len(text), voice_id, loc, self._format)
        try:
            result = self._transport.synthesize(**request)
        except SpeechError:
            raise
        except Exception as e:
            raise to_synthesis_error(e, self.name) from e

        content_type = result.get("ContentType")
        text_len = int(result.get("RequestCharacters", 0))
        self._log.speak_completed(text_len, content_type)
        return Spoken(
            audio=result["AudioStream"],
            text_len=text_len,
            format=self._format,
            content_type=content_type,
        )

    def _build_request(
        self,
        text: str,
        rate: str,
        locale: str | None,
        voice_id: str,
    ) -> dict[str, Any]:
        request: dict[str, Any] = {
            "OutputFormat": self._format,
            "SampleRate": self._sampling,  # mp3, ogg_vorbis: 8000-24000; pcm: 8000, 16000
            "Text": to_ssml(text, rate),
            "TextType": SPEECH.TEXT_TYPE_SSML,
            "VoiceId": voice_id,
        }
        if locale:
            request["LanguageCode"] = locale
        if self._engine:
            request["Engine"] = self._engine
        if self._speech_marks:
            request["SpeechMarkTypes"] = list(self._speech_marks)
        return request

    def __repr__(self) -> str:
        return (
            f"PollySpeakerV2(region={self._region!r}, format={self._format!r}, "
            f"sample_rate={self._sampling})"
        )
