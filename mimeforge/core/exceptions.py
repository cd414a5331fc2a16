"""Custom exceptions for mimeforge.

All mimeforge-specific exceptions inherit from MimeForgeError, allowing users
to catch all mimeforge errors with a single except clause if desired.

Errors raised by converter steps are not wrapped: they propagate out of
expansion unchanged.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class MimeForgeError(Exception):
    """Base exception for all mimeforge errors."""

    pass


class UnsupportedConverterError(MimeForgeError):
    """Raised when a converter name is not registered.

    Attributes:
        converter_name: The unknown converter identifier.
        available_converters: List of registered converter names.
    """

    def __init__(
        self,
        converter_name: str,
        available_converters: list[str] | None = None,
    ):
        self.converter_name = converter_name
        self.available_converters = available_converters or []

        if available_converters:
            super().__init__(
                f"Unsupported converter: '{converter_name}'. "
                f"Available converters: {', '.join(available_converters)}"
            )
        else:
            super().__init__(f"Unsupported converter: '{converter_name}'")


class UnsupportedStrategyError(MimeForgeError):
    """Raised when an expansion strategy is not known.

    Attributes:
        strategy: The requested strategy.
        available_strategies: Strategies the engine supports.
    """

    def __init__(self, strategy: str, available_strategies: list[str]):
        self.strategy = strategy
        self.available_strategies = available_strategies
        super().__init__(
            f"Unsupported expansion strategy: '{strategy}'. "
            f"Available strategies: {', '.join(available_strategies)}"
        )


class MimeTypeNotFoundError(MimeForgeError):
    """Raised when a dataset has no entry for a requested mimetype.

    Attributes:
        mime_type: The requested mimetype.
        available: Mimetypes present in the dataset.
    """

    def __init__(self, mime_type: str, available: list[str] | None = None):
        self.mime_type = mime_type
        self.available = available or []

        if self.available:
            super().__init__(
                f"Mimetype '{mime_type}' is not reachable. "
                f"Available: {', '.join(self.available)}"
            )
        else:
            super().__init__(f"Mimetype '{mime_type}' is not reachable")


class MimeTypeDetectionError(MimeForgeError):
    """Raised when the mimetype of a file cannot be detected.

    Attributes:
        path: Path that was being inspected.
    """

    def __init__(self, path: Path | str, message: str | None = None):
        self.path = Path(path)

        if message:
            super().__init__(message)
        else:
            super().__init__(f"Could not detect mimetype for: {self.path}")


class ConversionError(MimeForgeError):
    """Raised when materializing a converted representation fails.

    Attributes:
        source_type: Mimetype of the seed data.
        target_type: Mimetype that was requested.
        reason: Specific reason for failure.
    """

    def __init__(
        self,
        source_type: str,
        target_type: str,
        reason: str,
    ):
        self.source_type = source_type
        self.target_type = target_type
        self.reason = reason
        super().__init__(f"Failed to convert from '{source_type}' to '{target_type}': {reason}")


class ConfigError(MimeForgeError):
    """Raised when a configuration value has the wrong type.

    Attributes:
        field_name: Name of the configuration field.
        expected: Description of the expected type.
        actual: Value that was found.
    """

    def __init__(
        self,
        field_name: str,
        expected: str,
        actual: Any,
    ):
        self.field_name = field_name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid value for '{field_name}': expected {expected}, got {actual!r}"
        )
