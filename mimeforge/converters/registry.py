"""Converter registry for mimeforge.

The registry provides a plugin pattern for converter steps. Converters
register themselves using decorators, and the registry hands out single or
combined steps by name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import wraps
from typing import Any

from mimeforge.core.exceptions import UnsupportedConverterError
from mimeforge.core.models import DatasetEntry, MimeType, ResourceRef
from mimeforge.core.protocols import ConverterStep
from mimeforge.expand.combine import combine


@dataclass(frozen=True)
class ConverterInfo:
    """Metadata about a registered converter.

    Attributes:
        name: Converter identifier (e.g., "csv-to-json").
        step: The registered step, guarded by ``source`` if given.
        source: Mimetype the converter accepts, or None for any.
        targets: Mimetypes the converter may produce.
        description: First line of the step's docstring.
    """

    name: str
    step: ConverterStep
    source: MimeType | None = None
    targets: tuple[MimeType, ...] = field(default_factory=tuple)
    description: str = ""


class ConverterRegistry:
    """Central registry for converter steps.

    Converters register themselves with a function decorator:

        @ConverterRegistry.register("csv-to-json", source="text/csv",
                                    targets=("application/json",))
        def csv_to_json(url, entry):
            ...

    Usage:
        step = ConverterRegistry.get("csv-to-json")
        everything = ConverterRegistry.combined()
    """

    _converters: dict[str, ConverterInfo] = {}

    @classmethod
    def register(
        cls,
        name: str,
        source: MimeType | None = None,
        targets: tuple[MimeType, ...] = (),
    ):
        """Decorator to register a converter step.

        When ``source`` is given, the registered step returns no candidates
        for entries of any other mimetype without calling the function.

        Args:
            name: Converter identifier.
            source: Accepted mimetype, or None to accept everything.
            targets: Mimetypes the converter may produce.

        Returns:
            Decorator function. The decorated function is returned unchanged.
        """

        def decorator(step: ConverterStep) -> ConverterStep:
            registered = step if source is None else _guard(step, source)
            doc = (step.__doc__ or "").strip()
            cls._converters[name] = ConverterInfo(
                name=name,
                step=registered,
                source=source,
                targets=tuple(targets),
                description=doc.splitlines()[0] if doc else "",
            )
            return step

        return decorator

    @classmethod
    def get(cls, name: str) -> ConverterStep:
        """Get the step registered under ``name``.

        Raises:
            UnsupportedConverterError: If no converter registered for name.
        """
        return cls.info(name).step

    @classmethod
    def info(cls, name: str) -> ConverterInfo:
        """Get metadata for a registered converter.

        Raises:
            UnsupportedConverterError: If no converter registered for name.
        """
        if name not in cls._converters:
            raise UnsupportedConverterError(
                name,
                available_converters=list(cls._converters.keys()),
            )
        return cls._converters[name]

    @classmethod
    def combined(cls, names: list[str] | None = None) -> ConverterStep:
        """Combine registered converters into one step.

        Args:
            names: Converters to combine, in order. All registered converters
                in registration order if None or empty.

        Returns:
            Combined converter step.

        Raises:
            UnsupportedConverterError: If any name is not registered.
        """
        names = names or list(cls._converters.keys())
        return combine(*(cls.get(name) for name in names))

    @classmethod
    def list_converters(cls) -> dict[str, dict[str, Any]]:
        """List registered converters and what they convert.

        Example:
            {
                "csv-to-json": {
                    "source": "text/csv",
                    "targets": ["application/json"],
                    "description": "Convert CSV rows to a JSON array of objects.",
                },
            }
        """
        return {
            name: {
                "source": info.source,
                "targets": list(info.targets),
                "description": info.description,
            }
            for name, info in cls._converters.items()
        }

    @classmethod
    def has(cls, name: str) -> bool:
        """Check if a converter is registered under ``name``."""
        return name in cls._converters

    @classmethod
    def clear(cls) -> None:
        """Clear all registered converters. Primarily for testing."""
        cls._converters.clear()


def _guard(step: ConverterStep, source: MimeType) -> ConverterStep:
    """Restrict ``step`` to entries of mimetype ``source``."""

    @wraps(step)
    def guarded(url: ResourceRef, entry: DatasetEntry[Any]) -> list[DatasetEntry[Any]]:
        if entry.mime_type != source:
            return []
        return step(url, entry)

    return guarded
