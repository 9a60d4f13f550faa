"""Observability module."""

from speech.observability.logging import SpeakerLogger, configure_logging, get_logger

__all__ = ["SpeakerLogger", "configure_logging", "get_logger"]
