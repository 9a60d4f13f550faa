"""Structured Logging - JSON logs for speaker sessions.

Provides structured logging for:
- Session creation (backend, region, format)
- Speak requests and completions

Failures are raised to the caller rather than logged here.
"""

import logging
import sys

import structlog


def configure_logging(
    level: str = "INFO",
    json_format: bool = True,
) -> None:
    """Configure structured logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: If True, output JSON; else human-readable
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # botocore logs through the standard library
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structured logger.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Bound structlog logger
    """
    return structlog.get_logger(name)


class SpeakerLogger:
    """Logger for speaker session events."""

    def __init__(self, backend: str, region: str) -> None:
        self._backend = backend
        self._log = get_logger("speaker").bind(backend=backend, region=region)

    def session_created(self, output_format: str, sample_rate: int) -> None:
        """Log session construction."""
        self._log.info(
            "session_created",
            event_type="speaker.session_created",
            output_format=output_format,
            sample_rate=sample_rate,
        )

    def speak_requested(
        self,
        text_length: int,
        voice: str,
        locale: str | None,
        output_format: str,
    ) -> None:
        """Log an outgoing synthesis request."""
        self._log.debug(
            "speak_requested",
            event_type="speaker.speak_requested",
            text_length=text_length,
            voice=voice,
            locale=locale or "default",
            output_format=output_format,
        )

    def speak_completed(self, request_characters: int, content_type: str | None) -> None:
        """Log a synthesis response (before its stream is read)."""
        self._log.debug(
            "speak_completed",
            event_type="speaker.speak_completed",
            request_characters=request_characters,
            content_type=content_type,
        )
