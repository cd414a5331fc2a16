"""Converters to and from numpy arrays."""

from __future__ import annotations

import io
import json
from typing import Any

import numpy as np

from mimeforge.converters.registry import ConverterRegistry
from mimeforge.converters.types import CSV, JSON, NUMPY
from mimeforge.core.models import DatasetEntry, ResourceRef

# Parsing into an array is more expensive than a text re-serialization
LOAD_COST = 2
DUMP_COST = 1


@ConverterRegistry.register("csv-to-numpy", source=CSV, targets=(NUMPY,))
def csv_to_numpy(url: ResourceRef, entry: DatasetEntry[Any]) -> list[DatasetEntry[Any]]:
    """Parse numeric CSV (with a header row) into a 2-D float array.

    Non-numeric cells make the loader raise ValueError when the array is
    materialized; the mimetype is still reported as reachable.
    """
    data = entry.data

    def load() -> np.ndarray:
        return np.loadtxt(io.StringIO(data()), delimiter=",", skiprows=1, ndmin=2, dtype=float)

    return [DatasetEntry(NUMPY, entry.cost + LOAD_COST, load)]


@ConverterRegistry.register("numpy-to-json", source=NUMPY, targets=(JSON,))
def numpy_to_json(url: ResourceRef, entry: DatasetEntry[Any]) -> list[DatasetEntry[str]]:
    """Serialize an array as nested JSON lists."""
    data = entry.data

    def load() -> str:
        return json.dumps(np.asarray(data()).tolist())

    return [DatasetEntry(JSON, entry.cost + DUMP_COST, load)]
