"""Core domain models for mimeforge.

A dataset maps each mimetype to the cheapest known way of obtaining the
resource in that format: a (cost, CachedData) pair.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from mimeforge.core.cached import CachedData
from mimeforge.core.exceptions import MimeTypeNotFoundError

T = TypeVar("T")

MimeType = str
Cost = Union[int, float]
ResourceRef = str

# Raw loader produced by a converter step, or an already cached handle
DataSource = Union[Callable[[], T], CachedData[T]]

Dataset = dict[MimeType, tuple[Cost, CachedData[Any]]]


@dataclass(frozen=True)
class DatasetEntry(Generic[T]):
    """One way of obtaining a resource in a given format.

    Attributes:
        mime_type: Format of the data.
        cost: Total cost of obtaining the data in this format.
        data: Loader or cached handle for the data.
    """

    mime_type: MimeType
    cost: Cost
    data: DataSource[T]

    def cached(self) -> DatasetEntry[T]:
        """Return an equivalent entry whose data is a CachedData."""
        if isinstance(self.data, CachedData):
            return self
        return DatasetEntry(self.mime_type, self.cost, CachedData.wrap(self.data))


def dataset_from_entries(entries: Iterable[DatasetEntry[Any]]) -> Dataset:
    """Build a dataset from entries, keeping the cheapest per mimetype.

    On equal cost the first entry wins.
    """
    dataset: Dataset = {}
    for entry in entries:
        current = dataset.get(entry.mime_type)
        if current is not None and current[0] <= entry.cost:
            continue
        dataset[entry.mime_type] = (entry.cost, CachedData.wrap(entry.data))
    return dataset


def dataset_entries(dataset: Dataset) -> list[DatasetEntry[Any]]:
    """List the entries of a dataset in mapping order."""
    return [DatasetEntry(mime_type, cost, data) for mime_type, (cost, data) in dataset.items()]


def get_data(dataset: Dataset, mime_type: MimeType) -> CachedData[Any]:
    """Return the handle for a mimetype.

    Raises:
        MimeTypeNotFoundError: If the mimetype is not in the dataset.
    """
    if mime_type not in dataset:
        raise MimeTypeNotFoundError(mime_type, available=sorted(dataset))
    return dataset[mime_type][1]


def summarize(dataset: Dataset) -> dict[MimeType, Cost]:
    """Map each mimetype to its cost, cheapest first."""
    ordered = sorted(dataset.items(), key=lambda item: (item[1][0], item[0]))
    return {mime_type: cost for mime_type, (cost, _) in ordered}
