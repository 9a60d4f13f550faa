"""Tests for PollySpeakerV1.

Tests cover:
- Session construction and local validation
- Request building
- Legacy result shape (no content type)
- Error classification
"""

from unittest.mock import patch

import pytest
from botocore.config import Config
from botocore.exceptions import ClientError

from speech.exceptions import (
    InvalidParameterError,
    MissingCredentialsError,
    SynthesisError,
    UnsupportedFormatError,
)
from speech.polly.v1 import PollySpeakerV1
from speech.speaker import Credentials, Speaker
from tests.fakes import FakeTransport


class TestConstruction:
    """Tests for session construction."""

    def test_is_speaker(self, credentials, fake_transport):
        speaker = PollySpeakerV1(credentials, "eu-west-2", "mp3", 8000, transport=fake_transport)
        assert isinstance(speaker, Speaker)
        assert speaker.name == "polly-v1"
        assert speaker.output_format == "mp3"
        assert speaker.sample_rate == 8000

    def test_missing_credentials(self, exploding_transport):
        with patch("speech.polly.v1.BotocoreTransport") as transport_cls:
            with pytest.raises(MissingCredentialsError):
                PollySpeakerV1(Credentials(client_id="id", keys=[]), "eu-west-2", "pcm", 16000)
            transport_cls.assert_not_called()

    @pytest.mark.parametrize("fmt", ["ogg", "oggvorbis", "ogg-vorbis"])
    def test_ogg_synonyms(self, credentials, fake_transport, fmt):
        speaker = PollySpeakerV1(credentials, "eu-west-2", fmt, 16000, transport=fake_transport)
        assert speaker.output_format == "ogg_vorbis"

    def test_unknown_format(self, credentials, fake_transport):
        with pytest.raises(UnsupportedFormatError, match="unsupported format: flac"):
            PollySpeakerV1(credentials, "eu-west-2", "flac", 16000, transport=fake_transport)

    def test_format_offered_only_by_transport(self, credentials):
        transport = FakeTransport()
        transport.output_formats = lambda: frozenset({"pcm", "alaw"})
        speaker = PollySpeakerV1(credentials, "eu-west-2", "alaw", 8000, transport=transport)
        assert speaker.output_format == "alaw"

    def test_bad_sample_rate_before_transport(self, credentials, exploding_transport):
        with pytest.raises(InvalidParameterError, match="invalid sample rate for mp3: 44100"):
            PollySpeakerV1(credentials, "eu-west-2", "mp3", 44100, transport=exploding_transport)

    def test_default_transport(self, credentials):
        with patch("speech.polly.v1.BotocoreTransport") as transport_cls:
            transport_cls.return_value = FakeTransport()
            PollySpeakerV1(credentials, "eu-west-1", "pcm", 16000)
            transport_cls.assert_called_once_with(credentials, "eu-west-1", config=None)

    def test_client_config_passed_to_default_transport(self, credentials):
        config = Config(connect_timeout=2, read_timeout=10)
        with patch("speech.polly.v1.BotocoreTransport") as transport_cls:
            transport_cls.return_value = FakeTransport()
            PollySpeakerV1(credentials, "eu-west-1", "pcm", 16000, client_config=config)
            transport_cls.assert_called_once_with(credentials, "eu-west-1", config=config)


class TestSpeak:
    """Tests for PollySpeakerV1.speak()."""

    @pytest.fixture
    def speaker(self, credentials, fake_transport):
        return PollySpeakerV1(credentials, "eu-west-2", "pcm", 16000, transport=fake_transport)

    def test_request(self, speaker, fake_transport):
        speaker.speak("quando sono stato in Firenze", "medium", "it-IT", "Carla")
        request = fake_transport.calls[0]
        assert request["OutputFormat"] == "pcm"
        assert request["SampleRate"] == "16000"
        assert request["TextType"] == "ssml"
        assert request["VoiceId"] == "Carla"
        assert request["LanguageCode"] == "it-IT"
        assert request["Text"].startswith('<speak><amazon:auto-breaths><prosody rate="medium">')

    def test_no_content_type(self, speaker):
        """The legacy generation does not report a content type."""
        spoken = speaker.speak("hello", "medium", "", "Amy")
        assert spoken.content_type is None
        assert spoken.text_len == 42
        assert spoken.format == "pcm"

    def test_missing_request_characters(self, credentials):
        """A response without RequestCharacters counts as zero."""
        transport = FakeTransport(request_characters=None)
        speaker = PollySpeakerV1(credentials, "eu-west-2", "pcm", 16000, transport=transport)
        assert speaker.speak("hello", "medium", "", "Amy").text_len == 0

    def test_empty_locale(self, speaker, fake_transport):
        speaker.speak("hello", "medium", "", "Amy")
        assert "LanguageCode" not in fake_transport.calls[0]

    def test_unknown_locale(self, speaker, fake_transport):
        with pytest.raises(InvalidParameterError, match="invalid locale: zz"):
            speaker.speak("hello", "medium", "zz", "Amy")
        assert fake_transport.calls == []

    def test_unknown_voice(self, speaker, fake_transport):
        with pytest.raises(InvalidParameterError, match="invalid voice name: Robot"):
            speaker.speak("hello", "medium", "", "Robot")
        assert fake_transport.calls == []

    def test_json_requests_speech_marks(self, credentials, fake_transport):
        speaker = PollySpeakerV1(credentials, "eu-west-2", "json", 16000, transport=fake_transport)
        speaker.speak("hello", "medium", "", "Amy")
        assert fake_transport.calls[0]["SpeechMarkTypes"] == ["sentence", "word"]

    def test_vendor_error(self, credentials):
        error = ClientError(
            {
                "Error": {"Code": "TextLengthExceededException", "Message": "too long"},
                "ResponseMetadata": {"HTTPStatusCode": 400},
            },
            "SynthesizeSpeech",
        )
        speaker = PollySpeakerV1(
            credentials, "eu-west-2", "pcm", 16000, transport=FakeTransport(error=error)
        )
        with pytest.raises(SynthesisError) as exc_info:
            speaker.speak("hello", "medium", "", "Amy")
        assert exc_info.value.code == "TextLengthExceededException"
        assert exc_info.value.message == "too long"
        assert exc_info.value.fault == "client"
        assert exc_info.value.backend == "polly-v1"

    def test_general_error(self, credentials):
        speaker = PollySpeakerV1(
            credentials,
            "eu-west-2",
            "pcm",
            16000,
            transport=FakeTransport(error=OSError("network is unreachable")),
        )
        with pytest.raises(SynthesisError) as exc_info:
            speaker.speak("hello", "medium", "", "Amy")
        assert exc_info.value.decode() == ("general", "network is unreachable", "")
