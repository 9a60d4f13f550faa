"""SSML Encoding - Wrap plain text for Polly synthesis.

Only the characters that are reserved in SSML text content are escaped:
'<' and '&'. Everything else, including '>' and quotes, is passed through
unchanged.
"""

from __future__ import annotations

# Conventional prosody rate tokens. to_ssml does not enforce these.
SPEAKING_RATES = ("x-slow", "slow", "medium", "fast", "x-fast")

_ENTITIES = {
    "<": "&lt;",
    "&": "&amp;",
}


def escape_text(text: str) -> str:
    """Replace '<' and '&' with their entities, character by character."""
    return "".join(_ENTITIES.get(ch, ch) for ch in text)


def to_ssml(text: str, rate: str) -> str:
    """Convert text to Polly SSML at the given speaking rate.

    Args:
        text: Any Unicode text, possibly empty
        rate: Prosody rate token (e.g. "medium", "slow"), inserted verbatim

    Returns:
        A <speak> document with auto-breaths and a prosody rate directive

    Example:
        >>> to_ssml("a<b&c>d", "medium")
        '<speak><amazon:auto-breaths><prosody rate="medium">a&lt;b&amp;c>d</prosody></amazon:auto-breaths></speak>'
    """
    return (
        "<speak><amazon:auto-breaths>"
        f'<prosody rate="{rate}">'
        f"{escape_text(text)}"
        "</prosody>"
        "</amazon:auto-breaths>"
        "</speak>"
    )
