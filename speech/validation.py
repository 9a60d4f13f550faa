"""Parameter validation for speaker sessions.

Accepted token sets (locales, voices, formats) are supplied by each
backend at runtime; these helpers only test membership.
"""

from __future__ import annotations

from typing import Collection

from speech.config.constants import SPEECH
from speech.exceptions import InvalidParameterError, UnsupportedFormatError


def convert_enum(what: str, value: str, valid: Collection[str]) -> str:
    """Return value if it is one of the accepted tokens.

    Raises:
        InvalidParameterError: naming the field and the rejected value
    """
    if value in valid:
        return value
    raise InvalidParameterError(what, value)


def optional_enum(what: str, value: str | None, valid: Collection[str]) -> str | None:
    """Like convert_enum, but an empty value means no constraint (None)."""
    if not value:
        return None
    return convert_enum(what, value, valid)


def normalize_format(output_format: str) -> str:
    """Map the ogg vorbis spellings to Polly's "ogg_vorbis".

    Other formats are returned as given, for validation by the caller.
    """
    if output_format in SPEECH.OGG_SYNONYMS:
        return SPEECH.OGG_VORBIS
    return output_format


def convert_format(output_format: str, valid: Collection[str]) -> str:
    """Normalize an output format and check it against the accepted set."""
    fmt = normalize_format(output_format)
    if fmt not in valid:
        raise UnsupportedFormatError(output_format)
    return fmt


def validate_sample_rate(output_format: str, sample_rate: int) -> int:
    """Check sample_rate against the rates Polly accepts for output_format.

    Speech marks ("json") carry no audio, so any rate is accepted; so
    does any format without a local rate table.
    """
    rates = SPEECH.SAMPLE_RATES.get(output_format)
    if rates is None:
        return sample_rate
    if sample_rate not in rates:
        raise InvalidParameterError(
            "sample rate",
            sample_rate,
            message=f"invalid sample rate for {output_format}: {sample_rate}",
        )
    return sample_rate
