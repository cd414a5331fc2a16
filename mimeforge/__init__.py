"""mimeforge - discover every representation a resource can be converted to.

Given a resource held in one or more formats and a set of converter steps,
mimeforge walks the conversion graph and returns, for every reachable
mimetype, the cheapest cost found and a lazily computed, cached handle to the
converted data.

Key Characteristics:
- Converters are plain callables, merged with combine()
- Conversion work only runs when a handle is loaded, and at most once
- Pluggable converter registry with built-in CSV/JSON/YAML/numpy steps

Example:
    >>> import mimeforge
    >>> seed = mimeforge.dataset_from_entries(
    ...     [mimeforge.DatasetEntry("text/csv", 0, mimeforge.CachedData.of("a,b\\n1,2\\n"))]
    ... )
    >>> dataset = mimeforge.expand("data.csv", seed)
    >>> print(mimeforge.summarize(dataset))
    >>> dataset["application/json"][1].load()
"""

from mimeforge.config.models import ExpansionConfig
from mimeforge.converters.registry import ConverterInfo, ConverterRegistry
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
from mimeforge.expand.combine import combine
from mimeforge.expand.engine import ExpansionEngine

# Import built-in converters for registration side effects
from mimeforge import converters as _converters  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core models
    "CachedData",
    "Cost",
    "Dataset",
    "DatasetEntry",
    "MimeType",
    "ResourceRef",
    "ConverterStep",
    "dataset_entries",
    "dataset_from_entries",
    "get_data",
    "summarize",
    # Exceptions
    "ConfigError",
    "ConversionError",
    "MimeForgeError",
    "MimeTypeDetectionError",
    "MimeTypeNotFoundError",
    "UnsupportedConverterError",
    "UnsupportedStrategyError",
    # Registry
    "ConverterInfo",
    "ConverterRegistry",
    # Engine
    "ExpansionConfig",
    "ExpansionEngine",
    "combine",
    # Module-level functions
    "expand",
]


def expand(
    url: ResourceRef,
    seed: Dataset,
    step: ConverterStep | None = None,
    **options,
) -> Dataset:
    """Expand a seed dataset to every reachable representation.

    Args:
        url: Resource reference passed through to converters.
        seed: Initial dataset.
        step: Converter step. Combines the registered converters if None
            (restricted to ``converters`` when given in options).
        **options: ExpansionConfig fields.

    Returns:
        Dataset mapping each reachable mimetype to (cost, CachedData).

    Example:
        >>> dataset = mimeforge.expand("data.csv", seed, strategy="priority")
    """
    config = ExpansionConfig(**options)
    if step is None:
        step = ConverterRegistry.combined(config.converters)
    return ExpansionEngine(config).expand(url, seed, step)
