"""Polly V1 Speaker - Amazon Polly through a low-level botocore client.

The legacy generation: requests carry plain strings, there is no engine
selection, and responses do not report a content type.
"""

from __future__ import annotations

from typing import Any

from botocore.config import Config
from botocore.exceptions import BotoCoreError

from speech.config.constants import SPEECH
from speech.exceptions import ConfigurationError, SpeechError
from speech.observability.logging import SpeakerLogger
from speech.polly.errors import to_synthesis_error
from speech.polly.transport import BotocoreTransport, PollyTransport
from speech.speaker import Credentials, Spoken
from speech.ssml import to_ssml
from speech.validation import (
    convert_enum,
    convert_format,
    normalize_format,
    optional_enum,
    validate_sample_rate,
)


class PollySpeakerV1:
    """A session that converts text to speech, by calls to speak.

    The language, voice and speaking rate can be different on each call.
    """

    name = "polly-v1"

    def __init__(
        self,
        credentials: Credentials,
        region: str,
        output_format: str,
        sample_rate: int,
        *,
        transport: PollyTransport | None = None,
        client_config: Config | None = None,
    ) -> None:
        credentials.validate()
        validate_sample_rate(normalize_format(output_format), sample_rate)
        if transport is None:
            try:
                transport = BotocoreTransport(credentials, region, config=client_config)
            except BotoCoreError as e:
                raise ConfigurationError(f"polly session error: {e}") from e
        self._transport = transport
        self._region = region
        self._format = convert_format(output_format, transport.output_formats())
        self._sampling = str(sample_rate)
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

    def speak(self, text: str, rate: str, locale: str, voice: str) -> Spoken:
        """Say text at a given rate within a locale using a specified voice.

        The rate is either "medium" or "slow"; an empty locale defaults
        to the voice's own.
        """
        loc = optional_enum("locale", locale, self._transport.locales())
        voice_id = convert_enum("voice name", voice, self._transport.voices())

        request: dict[str, Any] = {
            "OutputFormat": self._format,
            "SampleRate": self._sampling,
            "Text": to_ssml(text, rate),
            "TextType": SPEECH.TEXT_TYPE_SSML,
            "VoiceId": voice_id,
        }
        if loc:
            request["LanguageCode"] = loc
        if self._format == SPEECH.SPEECH_MARKS_FORMAT:
            request["SpeechMarkTypes"] = list(SPEECH.DEFAULT_SPEECH_MARKS)

        self._log.speak_requested(len(text), voice_id, loc, self._format)
        try:
            result = self._transport.synthesize(**request)
        except SpeechError:
            raise
        except Exception as e:
            raise to_synthesis_error(e, self.name) from e

        text_len = int(result.get("RequestCharacters", 0))
        self._log.speak_completed(text_len, None)
        return Spoken(
            audio=result["AudioStream"],
            text_len=text_len,
            format=request["OutputFormat"],
        )
