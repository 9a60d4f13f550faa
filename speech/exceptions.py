"""Speech Exception Hierarchy.

Provides structured exception classes so callers can tell local
configuration mistakes apart from failures reported by the vendor.

Hierarchy:
    SpeechError (base)
    ├── ConfigurationError
    │   ├── MissingCredentialsError
    │   └── InvalidParameterError
    │       └── UnsupportedFormatError
    ├── SynthesisError
    └── StreamReadError
"""

from typing import Any

GENERAL_CODE = "general"


class SpeechError(Exception):
    """Base exception for all speech errors.

    Attributes:
        message: Human-readable error description
        details: Additional context about the error
        recoverable: Whether the error can be recovered from
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "recoverable": self.recoverable,
        }


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(SpeechError):
    """Base exception for local, deterministic configuration errors."""

    pass


class MissingCredentialsError(ConfigurationError):
    """Raised when the credential id or first key is missing."""

    def __init__(self, reason: str = "missing id or key in credential") -> None:
        super().__init__(message=reason, recoverable=False)


class InvalidParameterError(ConfigurationError):
    """Raised when a value is not in the backend's accepted set."""

    def __init__(self, field: str, value: Any, message: str | None = None) -> None:
        super().__init__(
            message=message or f"invalid {field}: {value}",
            recoverable=False,
        )
        self.field = field
        self.value = value


class UnsupportedFormatError(InvalidParameterError):
    """Raised when an output format is not recognised."""

    def __init__(self, value: str) -> None:
        super().__init__(
            "output format",
            value,
            message=f"unsupported format: {value}",
        )


# =============================================================================
# Request Errors
# =============================================================================


class SynthesisError(SpeechError):
    """Raised when a synthesis request fails.

    Vendor-shaped failures carry the vendor's code, message and fault
    classification ("client", "server" or "unknown"). Anything else is
    reported with code "general" and the original error text.
    """

    def __init__(
        self,
        code: str,
        message: str,
        fault: str = "",
        backend: str | None = None,
    ) -> None:
        details: dict[str, Any] = {"code": code}
        if fault:
            details["fault"] = fault
        if backend:
            details["backend"] = backend
        super().__init__(
            message=message,
            details=details,
            recoverable=fault == "server",
        )
        self.code = code
        self.fault = fault
        self.backend = backend

    @property
    def is_vendor_error(self) -> bool:
        """True when the failure was reported by the vendor API."""
        return self.code != GENERAL_CODE

    def decode(self) -> tuple[str, str, str]:
        """Return (code, message, fault)."""
        return self.code, self.message, self.fault


class StreamReadError(SpeechError):
    """Raised when draining a returned audio stream fails."""

    def __init__(self, reason: str, bytes_read: int | None = None) -> None:
        details: dict[str, Any] = {"reason": reason}
        if bytes_read is not None:
            details["bytes_read"] = bytes_read
        super().__init__(
            message=f"audio stream read failed: {reason}",
            details=details,
            recoverable=False,
        )
        self.reason = reason
        self.bytes_read = bytes_read


def decode_error(err: BaseException) -> tuple[str, str, str]:
    """Return the code, message and fault of any error.

    SynthesisError values are decoded unchanged and raw vendor errors
    (botocore ClientError) yield their service code, message and fault.
    Every other error reverts to "general" and its text, with no fault.
    """
    if isinstance(err, SynthesisError):
        return err.decode()

    # Lazy import: the vendor decoder depends on this module
    from speech.polly.errors import decode_error_v2

    return decode_error_v2(err)
