"""Combining converter steps."""

from __future__ import annotations

from typing import Any

from mimeforge.core.models import DatasetEntry, ResourceRef
from mimeforge.core.protocols import ConverterStep


def combine(*steps: ConverterStep) -> ConverterStep:
    """Merge converter steps into one.

    The combined step calls every step with the same entry and concatenates
    their candidates, in the order the steps were given.
    """

    def combined(url: ResourceRef, entry: DatasetEntry[Any]) -> list[DatasetEntry[Any]]:
        candidates: list[DatasetEntry[Any]] = []
        for step in steps:
            candidates.extend(step(url, entry))
        return candidates

    return combined
