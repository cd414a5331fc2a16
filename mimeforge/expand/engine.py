"""Dataset expansion engine.

Expands a seed dataset through a converter step until no cheaper or novel
mimetype can be discovered, keeping one (cost, CachedData) pair per
mimetype.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import Any

from mimeforge.config.models import PRIORITY, STACK, ExpansionConfig
from mimeforge.core.models import Dataset, DatasetEntry, ResourceRef, dataset_entries
from mimeforge.core.protocols import ConverterStep

logger = logging.getLogger(__name__)


class ExpansionEngine:
    """Computes every representation reachable from a seed dataset.

    With the default "stack" strategy the worklist is popped last-in-first-out,
    so a mimetype reached first through an expensive path is expanded, then
    overwritten and expanded again when a cheaper path turns up. Only the
    overwriting entry is expanded; nothing else is revisited. The "priority"
    strategy pops the cheapest pending entry first instead, so when costs
    never decrease along a chain each mimetype is expanded once, at its
    cheapest cost.

    Example:
        >>> engine = ExpansionEngine()
        >>> dataset = engine.expand("file.csv", seed, step)
        >>> dataset["application/json"][1].load()
    """

    def __init__(self, config: ExpansionConfig | None = None):
        """Initialize engine with configuration.

        Args:
            config: Expansion configuration. Uses defaults if None.
        """
        self.config = config or ExpansionConfig()
        self.config.validate()

    def expand(
        self,
        url: ResourceRef,
        seed: Dataset,
        step: ConverterStep,
    ) -> Dataset:
        """Expand ``seed`` through ``step``.

        Args:
            url: Resource reference passed to every step call.
            seed: Initial dataset; may be empty.
            step: Converter step, possibly a combined one.

        Returns:
            Dataset with every discovered mimetype, its best cost and a
            cached handle.

        Raises:
            Any exception raised by ``step``; no partial result is returned.
        """
        entries = [entry.cached() for entry in dataset_entries(seed)]
        if self.config.strategy == PRIORITY:
            return _expand_priority(url, entries, step)
        return _expand_stack(url, entries, step)


def _expand_stack(
    url: ResourceRef,
    entries: list[DatasetEntry[Any]],
    step: ConverterStep,
) -> Dataset:
    to_process = list(entries)
    processed: Dataset = {}

    while to_process:
        entry = to_process.pop()
        if not _record(processed, entry):
            continue
        to_process.extend(_convert(url, entry, step))

    logger.debug("Expanded %s to %d mimetypes", url, len(processed))
    return processed


def _expand_priority(
    url: ResourceRef,
    entries: list[DatasetEntry[Any]],
    step: ConverterStep,
) -> Dataset:
    # Counter breaks cost ties in insertion order so entries never compare
    counter = itertools.count()
    to_process = [(entry.cost, next(counter), entry) for entry in entries]
    heapq.heapify(to_process)
    processed: Dataset = {}

    while to_process:
        _, _, entry = heapq.heappop(to_process)
        if not _record(processed, entry):
            continue
        for candidate in _convert(url, entry, step):
            heapq.heappush(to_process, (candidate.cost, next(counter), candidate))

    logger.debug("Expanded %s to %d mimetypes", url, len(processed))
    return processed


def _record(processed: Dataset, entry: DatasetEntry[Any]) -> bool:
    """Store ``entry`` unless an equal or cheaper one is already processed."""
    current = processed.get(entry.mime_type)
    if current is not None and current[0] <= entry.cost:
        logger.debug(
            "Discarding %s at cost %s (have %s)", entry.mime_type, entry.cost, current[0]
        )
        return False
    if current is not None:
        logger.debug(
            "Replacing %s at cost %s with cost %s", entry.mime_type, current[0], entry.cost
        )
    processed[entry.mime_type] = (entry.cost, entry.data)
    return True


def _convert(
    url: ResourceRef,
    entry: DatasetEntry[Any],
    step: ConverterStep,
) -> list[DatasetEntry[Any]]:
    candidates = [candidate.cached() for candidate in step(url, entry)]
    if candidates:
        logger.debug(
            "%s -> %s",
            entry.mime_type,
            ", ".join(f"{c.mime_type} ({c.cost})" for c in candidates),
        )
    return candidates


def expand(
    url: ResourceRef,
    seed: Dataset,
    step: ConverterStep,
    strategy: str = STACK,
) -> Dataset:
    """Convenience function to expand a dataset.

    Args:
        url: Resource reference passed to every step call.
        seed: Initial dataset.
        step: Converter step.
        strategy: "stack" (default) or "priority".

    Returns:
        The expanded dataset.
    """
    engine = ExpansionEngine(ExpansionConfig(strategy=strategy))
    return engine.expand(url, seed, step)
