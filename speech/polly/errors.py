"""Polly error decoding.

botocore raises ClientError for failures the service reported; those
carry a code and message. Everything else (connection failures,
timeouts, local errors) is reported as "general" with its text.

Codes of interest from SynthesizeSpeech:
    TextLengthExceededException, InvalidSampleRateException,
    InvalidSsmlException, LexiconNotFoundException,
    ServiceFailureException, MarksNotSupportedForFormatException,
    SsmlMarksNotSupportedForTextTypeException,
    LanguageNotSupportedException, EngineNotSupportedException
"""

from __future__ import annotations

from botocore.exceptions import ClientError

from speech.exceptions import GENERAL_CODE, SynthesisError


def fault_for_status(status: int | None) -> str:
    """Classify an HTTP status as a client or server fault."""
    if status is None:
        return "unknown"
    if 400 <= status < 500:
        return "client"
    if status >= 500:
        return "server"
    return "unknown"


def decode_error_v1(err: BaseException) -> tuple[str, str]:
    """Return the code and message of a Polly error.

    Reverts to "general" and the error text for anything that is not a
    service error. For Polly, the break-down is rarely more informative
    than the plain error text.
    """
    code, msg, _ = decode_error_v2(err)
    return code, msg


def decode_error_v2(err: BaseException) -> tuple[str, str, str]:
    """Return the code, message and fault of a Polly error.

    Reverts to "general", the error text and no fault for anything that
    is not a service error.
    """
    if isinstance(err, SynthesisError):
        return err.decode()
    if isinstance(err, ClientError):
        error = err.response.get("Error", {})
        status = err.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
        return (
            error.get("Code") or GENERAL_CODE,
            error.get("Message") or str(err),
            fault_for_status(status),
        )
    return GENERAL_CODE, str(err), ""


def to_synthesis_error(err: BaseException, backend: str) -> SynthesisError:
    """Wrap a failed request as a SynthesisError."""
    code, msg, fault = decode_error_v2(err)
    return SynthesisError(code=code, message=msg, fault=fault, backend=backend)
