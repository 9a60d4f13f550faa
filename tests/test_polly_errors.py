"""Tests for Polly error decoding."""

import pytest
from botocore.exceptions import ClientError, NoCredentialsError

from speech.exceptions import SynthesisError
from speech.polly.errors import (
    decode_error_v1,
    decode_error_v2,
    fault_for_status,
    to_synthesis_error,
)


def client_error(code: str, message: str, status: int | None = 400) -> ClientError:
    response: dict = {"Error": {"Code": code, "Message": message}}
    if status is not None:
        response["ResponseMetadata"] = {"HTTPStatusCode": status}
    return ClientError(response, "SynthesizeSpeech")


class TestFaultForStatus:
    """Tests for fault_for_status."""

    @pytest.mark.parametrize("status", [400, 403, 404, 429])
    def test_client(self, status):
        assert fault_for_status(status) == "client"

    @pytest.mark.parametrize("status", [500, 502, 503])
    def test_server(self, status):
        assert fault_for_status(status) == "server"

    @pytest.mark.parametrize("status", [None, 200, 302])
    def test_unknown(self, status):
        assert fault_for_status(status) == "unknown"


class TestDecodeErrorV2:
    """Tests for decode_error_v2."""

    def test_client_error(self):
        err = client_error("LanguageNotSupportedException", "language not supported")
        assert decode_error_v2(err) == (
            "LanguageNotSupportedException",
            "language not supported",
            "client",
        )

    def test_client_error_without_status(self):
        err = client_error("ServiceFailureException", "boom", status=None)
        assert decode_error_v2(err)[2] == "unknown"

    def test_botocore_error_is_general(self):
        err = NoCredentialsError()
        assert decode_error_v2(err) == ("general", "Unable to locate credentials", "")

    def test_plain_error_is_general(self):
        assert decode_error_v2(ValueError("bad")) == ("general", "bad", "")

    def test_synthesis_error_unchanged(self):
        err = SynthesisError("InvalidSsmlException", "bad ssml", "client")
        assert decode_error_v2(err) == ("InvalidSsmlException", "bad ssml", "client")


class TestDecodeErrorV1:
    """Tests for decode_error_v1."""

    def test_client_error(self):
        err = client_error("InvalidSampleRateException", "bad rate")
        assert decode_error_v1(err) == ("InvalidSampleRateException", "bad rate")

    def test_plain_error(self):
        assert decode_error_v1(RuntimeError("oops")) == ("general", "oops")


class TestToSynthesisError:
    """Tests for to_synthesis_error."""

    def test_wraps_client_error(self):
        err = to_synthesis_error(client_error("LexiconNotFoundException", "no lexicon", 404), "polly-v2")
        assert isinstance(err, SynthesisError)
        assert err.decode() == ("LexiconNotFoundException", "no lexicon", "client")
        assert err.backend == "polly-v2"

    def test_wraps_timeout(self):
        err = to_synthesis_error(TimeoutError("read timeout"), "polly-v1")
        assert err.decode() == ("general", "read timeout", "")
