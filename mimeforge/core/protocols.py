"""Protocol interfaces for mimeforge.

Converter steps are plain callables; this protocol only gives them a type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from mimeforge.core.models import DatasetEntry, ResourceRef


class ConverterStep(Protocol):
    """Derives candidate representations from one dataset entry.

    A step must be total: when it cannot convert the entry it returns an
    empty list instead of raising. Each candidate carries its total cost and
    a raw loader; the engine adds caching.
    """

    def __call__(
        self,
        url: ResourceRef,
        entry: DatasetEntry[Any],
    ) -> list[DatasetEntry[Any]]:
        """Convert ``entry`` of resource ``url``.

        Args:
            url: Resource being converted, passed through unchanged.
            entry: Entry whose data is a CachedData.

        Returns:
            Zero or more candidate entries.
        """
        ...
