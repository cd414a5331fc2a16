"""Converter steps for mimeforge.

This module provides the converter registry and auto-import of the built-in
converters.
"""

from mimeforge.converters.registry import ConverterInfo, ConverterRegistry

__all__ = ["ConverterInfo", "ConverterRegistry"]


def _register_converters() -> None:
    """Import converter modules to trigger registration decorators."""
    from mimeforge.converters import numeric, text  # noqa: F401


# Register converters on module import
_register_converters()
