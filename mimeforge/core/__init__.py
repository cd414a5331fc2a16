"""Core domain models and protocols for mimeforge."""

from mimeforge.core.cached import CachedData
from mimeforge.core.exceptions import (
    ConfigError,
    ConversionError,
    MimeForgeError,
    MimeTypeDetectionError,
    MimeTypeNotFoundError,
    UnsupportedConverterError,
    UnsupportedStrategyError,
)
from mimeforge.core.models import (
    Cost,
    Dataset,
    DatasetEntry,
    MimeType,
    ResourceRef,
    dataset_entries,
    dataset_from_entries,
    get_data,
    summarize,
)
from mimeforge.core.protocols import ConverterStep

__all__ = [
    # Models
    "CachedData",
    "Cost",
    "Dataset",
    "DatasetEntry",
    "MimeType",
    "ResourceRef",
    "dataset_entries",
    "dataset_from_entries",
    "get_data",
    "summarize",
    # Protocols
    "ConverterStep",
    # Exceptions
    "ConfigError",
    "ConversionError",
    "MimeForgeError",
    "MimeTypeDetectionError",
    "MimeTypeNotFoundError",
    "UnsupportedConverterError",
    "UnsupportedStrategyError",
]
