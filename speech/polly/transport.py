"""Polly Transports - Authenticated clients for the Polly API.

A transport resolves credentials and region into a client once, exposes
the token sets the service model accepts, and issues SynthesizeSpeech
requests. Creating a transport performs no network I/O.

Two client generations are supported:
- BotocoreTransport: low-level botocore session and client
- Boto3Transport: boto3 session and client
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import boto3
import botocore.session
from botocore.config import Config

from speech.speaker import Credentials

SERVICE_NAME = "polly"


@runtime_checkable
class PollyTransport(Protocol):
    """What a Polly speaker needs from the vendor SDK."""

    def locales(self) -> frozenset[str]:
        """Accepted LanguageCode values."""
        ...

    def voices(self) -> frozenset[str]:
        """Accepted VoiceId values."""
        ...

    def output_formats(self) -> frozenset[str]:
        """Accepted OutputFormat values."""
        ...

    def speech_mark_types(self) -> frozenset[str]:
        """Accepted SpeechMarkType values."""
        ...

    def engines(self) -> frozenset[str]:
        """Accepted Engine values."""
        ...

    def synthesize(self, **request: Any) -> dict[str, Any]:
        """Issue one SynthesizeSpeech request and return the raw response."""
        ...


class _ServiceModelEnums:
    """Enumerations read from a client's service model."""

    def __init__(self, client: Any) -> None:
        self._model = client.meta.service_model
        self._cache: dict[str, frozenset[str]] = {}

    def get(self, shape_name: str) -> frozenset[str]:
        values = self._cache.get(shape_name)
        if values is None:
            values = frozenset(self._model.shape_for(shape_name).enum)
            self._cache[shape_name] = values
        return values


class _ClientTransport:
    """Shared behaviour once a Polly client exists."""

    name = "polly"

    def __init__(self, client: Any) -> None:
        self._client = client
        self._enums = _ServiceModelEnums(client)

    @property
    def client(self) -> Any:
        """The underlying SDK client."""
        return self._client

    @property
    def region(self) -> str:
        return self._client.meta.region_name

    def locales(self) -> frozenset[str]:
        return self._enums.get("LanguageCode")

    def voices(self) -> frozenset[str]:
        return self._enums.get("VoiceId")

    def output_formats(self) -> frozenset[str]:
        return self._enums.get("OutputFormat")

    def speech_mark_types(self) -> frozenset[str]:
        return self._enums.get("SpeechMarkType")

    def engines(self) -> frozenset[str]:
        return self._enums.get("Engine")

    def synthesize(self, **request: Any) -> dict[str, Any]:
        return self._client.synthesize_speech(**request)


class BotocoreTransport(_ClientTransport):
    """Polly client built directly on a botocore session.

    config carries client options such as connect_timeout, read_timeout
    and retries; request deadlines are set there.
    """

    name = "botocore"

    def __init__(
        self,
        credentials: Credentials,
        region: str,
        session: botocore.session.Session | None = None,
        config: Config | None = None,
    ) -> None:
        session = session or botocore.session.get_session()
        client = session.create_client(
            SERVICE_NAME,
            region_name=region,
            aws_access_key_id=credentials.client_id,
            aws_secret_access_key=credentials.secret,
            aws_session_token=credentials.session_token,
            config=config,
        )
        super().__init__(client)


class Boto3Transport(_ClientTransport):
    """Polly client built on a boto3 session with static credentials."""

    name = "boto3"

    def __init__(
        self,
        credentials: Credentials,
        region: str,
        config: Config | None = None,
    ) -> None:
        session = boto3.session.Session(
            aws_access_key_id=credentials.client_id,
            aws_secret_access_key=credentials.secret,
            aws_session_token=credentials.session_token,
            region_name=region,
        )
        super().__init__(session.client(SERVICE_NAME, config=config))
