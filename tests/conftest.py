"""Pytest configuration and shared fixtures."""

import pytest

from tests.fakes import ExplodingTransport, FakeTransport


@pytest.fixture
def credentials():
    """Provide complete test credentials."""
    from speech.speaker import Credentials

    return Credentials(client_id="AKIDEXAMPLE", keys=["wJalrXUtnFEMI/K7MDENG"])


@pytest.fixture
def fake_transport() -> FakeTransport:
    """Provide a recording fake transport."""
    return FakeTransport()


@pytest.fixture
def exploding_transport() -> ExplodingTransport:
    """Provide a transport that must never be used."""
    return ExplodingTransport()


@pytest.fixture
def clear_settings_cache():
    """Clear cached settings around a test."""
    from speech.config.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
