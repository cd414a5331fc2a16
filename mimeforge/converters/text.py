"""Converters between text formats (CSV, JSON, YAML).

Text data is carried as ``str``. Every converter defers the actual work to
the returned loader, and reports its cost as the entry's cost plus a fixed
step cost.
"""

from __future__ import annotations

import csv
import io
import json
from typing import Any

import yaml

from mimeforge.converters.registry import ConverterRegistry
from mimeforge.converters.types import CSV, JSON, YAML
from mimeforge.core.models import DatasetEntry, ResourceRef

STEP_COST = 1


@ConverterRegistry.register("csv-to-json", source=CSV, targets=(JSON,))
def csv_to_json(url: ResourceRef, entry: DatasetEntry[Any]) -> list[DatasetEntry[str]]:
    """Convert CSV rows to a JSON array of objects keyed by the header row."""
    data = entry.data

    def load() -> str:
        rows = list(csv.DictReader(io.StringIO(data())))
        return json.dumps(rows)

    return [DatasetEntry(JSON, entry.cost + STEP_COST, load)]


@ConverterRegistry.register("json-to-yaml", source=JSON, targets=(YAML,))
def json_to_yaml(url: ResourceRef, entry: DatasetEntry[Any]) -> list[DatasetEntry[str]]:
    """Re-serialize a JSON document as YAML."""
    data = entry.data

    def load() -> str:
        return yaml.safe_dump(json.loads(data()), sort_keys=False)

    return [DatasetEntry(YAML, entry.cost + STEP_COST, load)]


@ConverterRegistry.register("yaml-to-json", source=YAML, targets=(JSON,))
def yaml_to_json(url: ResourceRef, entry: DatasetEntry[Any]) -> list[DatasetEntry[str]]:
    """Re-serialize a YAML document as JSON."""
    data = entry.data

    def load() -> str:
        return json.dumps(yaml.safe_load(data()))

    return [DatasetEntry(JSON, entry.cost + STEP_COST, load)]
