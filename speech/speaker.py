"""Speaker Interface - Provider-agnostic text-to-speech capability.

Callers hold a Speaker and never a concrete backend, so a session on
one vendor or API generation can be swapped for another without
touching call sites.

Usage:
    speaker = PollySpeakerV2(creds, "eu-west-2", "mp3", 22050)
    with speaker.speak("bonjour", "medium", "fr-FR", "Lea") as spoken:
        for chunk in spoken.iter_chunks():
            out.write(chunk)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Iterator, Protocol, runtime_checkable

from speech.exceptions import MissingCredentialsError, StreamReadError

DEFAULT_CHUNK_SIZE = 4096


@dataclass
class Credentials:
    """Service credentials: an id and one or more keys.

    Only the first key is presented to the service.
    """

    client_id: str
    keys: list[str] = field(default_factory=list)
    session_token: str | None = None

    def validate(self) -> None:
        """Raise MissingCredentialsError unless id and first key are set."""
        if not self.client_id or not self.keys or not self.keys[0]:
            raise MissingCredentialsError()

    @property
    def secret(self) -> str:
        """The key presented to the service."""
        self.validate()
        return self.keys[0]

    @classmethod
    def from_env(
        cls,
        id_var: str = "SPEECH_ID",
        key_var: str = "SPEECH_KEY",
    ) -> Credentials:
        """Build credentials from environment variables (unvalidated)."""
        key = os.environ.get(key_var, "")
        return cls(
            client_id=os.environ.get(id_var, ""),
            keys=[key] if key else [],
        )

    def __repr__(self) -> str:
        return f"Credentials(client_id={self.client_id!r}, keys=<{len(self.keys)} hidden>)"


@dataclass
class Spoken:
    """The audio stream and metadata returned by one speak call.

    The stream is single pass and unseekable. It belongs to the caller,
    who must close it after reading; use the instance as a context
    manager to do so.
    """

    audio: Any  # file-like: read(amt) and close()
    text_len: int  # request characters billed for the text, not audio bytes
    format: str  # "mp3", "ogg_vorbis", "pcm" or "json"
    content_type: str | None = None
    _bytes_read: int = field(default=0, init=False, repr=False)

    def read(self, amt: int | None = None) -> bytes:
        """Read up to amt bytes (all remaining if None)."""
        try:
            data = self.audio.read() if amt is None else self.audio.read(amt)
        except Exception as e:
            raise StreamReadError(str(e), self._bytes_read) from e
        self._bytes_read += len(data)
        return data

    def iter_chunks(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
        """Yield the audio in chunks until the stream is exhausted."""
        while True:
            chunk = self.read(chunk_size)
            if not chunk:
                return
            yield chunk

    @property
    def bytes_read(self) -> int:
        """Audio bytes consumed so far."""
        return self._bytes_read

    def close(self) -> None:
        """Release the underlying stream."""
        self.audio.close()

    def __enter__(self) -> Spoken:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@runtime_checkable
class Speaker(Protocol):
    """A session on a text-to-speech engine.

    Output format and sample rate are fixed per session; the language,
    voice and speaking rate can differ on each call.
    """

    def speak(self, text: str, rate: str, locale: str, voice: str) -> Spoken:
        """Say text at a speaking rate ("medium", "slow") in a locale and voice.

        An empty locale means the voice's default locale.

        Raises:
            InvalidParameterError: locale or voice not accepted by the backend
            SynthesisError: the request failed
        """
        ...
