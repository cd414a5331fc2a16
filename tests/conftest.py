"""Pytest configuration and fixtures for mimeforge tests."""

from collections import Counter
from pathlib import Path

import pytest

from mimeforge.converters import ConverterRegistry
from mimeforge.core.cached import CachedData
from mimeforge.core.models import DatasetEntry


class GraphStep:
    """Converter step driven by an edge table.

    ``edges`` maps a source mimetype to (target, cost) pairs. Costs are
    cumulative: each candidate costs the entry's cost plus the edge cost.
    Calls to the step and to every candidate loader are counted.
    """

    def __init__(self, edges: dict[str, list[tuple[str, float]]]):
        self.edges = edges
        self.calls: Counter[str] = Counter()
        self.loads: Counter[str] = Counter()
        self.urls: list[str] = []

    def __call__(self, url, entry):
        self.calls[entry.mime_type] += 1
        self.urls.append(url)
        return [
            DatasetEntry(target, entry.cost + cost, self._loader(entry, target))
            for target, cost in self.edges.get(entry.mime_type, [])
        ]

    def _loader(self, entry, target):
        data = entry.data

        def load():
            self.loads[target] += 1
            return f"{target}({data()})"

        return load


@pytest.fixture
def graph_step():
    """Factory for edge-table converter steps."""
    return GraphStep


@pytest.fixture
def seed_of():
    """Factory for single-entry seed datasets with in-memory data."""

    def make(mime_type: str, value: str = "seed", cost: float = 0):
        return {mime_type: (cost, CachedData.of(value))}

    return make


@pytest.fixture
def restore_registry():
    """Snapshot the converter registry and restore it after the test."""
    saved = dict(ConverterRegistry._converters)
    yield ConverterRegistry
    ConverterRegistry._converters.clear()
    ConverterRegistry._converters.update(saved)


@pytest.fixture
def csv_file(tmp_path: Path) -> Path:
    """Create a small numeric CSV file."""
    path = tmp_path / "points.csv"
    path.write_text("x,y\n1,2\n3,4\n")
    return path


@pytest.fixture
def text_csv_file(tmp_path: Path) -> Path:
    """Create a CSV file with a non-numeric column."""
    path = tmp_path / "people.csv"
    path.write_text("name,age\nada,36\ngrace,45\n")
    return path
