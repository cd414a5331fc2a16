"""Configuration models for mimeforge.

Defines the configuration dataclass for expansion runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from mimeforge.core.exceptions import ConfigError, UnsupportedStrategyError

STACK = "stack"
PRIORITY = "priority"
STRATEGIES = [STACK, PRIORITY]


@dataclass
class ExpansionConfig:
    """Configuration for an expansion run.

    Attributes:
        strategy: Worklist discipline. "stack" pops last-in-first-out;
            "priority" pops the cheapest pending entry first.
        converters: Registered converter names to combine. Empty means all.
        seed_cost: Cost assigned to seed data loaded by the CLI.
        mime_types: File suffix to mimetype overrides (e.g. ".tsv": "text/csv").
    """

    strategy: str = STACK
    converters: list[str] = field(default_factory=list)
    seed_cost: float = 0
    mime_types: dict[str, str] = field(default_factory=dict)

    def validate(self) -> None:
        """Check the configured strategy and seed cost.

        Raises:
            UnsupportedStrategyError: If the strategy is unknown.
            ConfigError: If seed_cost is not a number.
        """
        if self.strategy not in STRATEGIES:
            raise UnsupportedStrategyError(self.strategy, STRATEGIES)
        # bool is an int subclass
        if isinstance(self.seed_cost, bool) or not isinstance(self.seed_cost, (int, float)):
            raise ConfigError("seed_cost", "a number", self.seed_cost)

    @classmethod
    def from_yaml(cls, path: Path | str) -> "ExpansionConfig":
        """Load configuration from a YAML file.

        Example YAML:
            strategy: priority
            seed_cost: 0

            converters:
              - csv-to-json
              - json-to-yaml

            mime_types:
              .tsv: text/csv

        Args:
            path: Path to YAML config file.

        Returns:
            ExpansionConfig instance.
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExpansionConfig":
        """Create config from a dictionary.

        Args:
            data: Configuration dictionary.

        Returns:
            Validated ExpansionConfig instance.
        """
        config = cls()

        config.strategy = data.get("strategy", STACK)
        config.seed_cost = data.get("seed_cost", 0)

        converters = data.get("converters", [])
        if isinstance(converters, list):
            config.converters = [str(name) for name in converters]

        mime_types = data.get("mime_types", {})
        if isinstance(mime_types, dict):
            # Accept suffixes with or without the leading dot
            config.mime_types = {
                (suffix if suffix.startswith(".") else f".{suffix}").lower(): mime
                for suffix, mime in mime_types.items()
            }

        config.validate()
        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary for serialization."""
        result: dict[str, Any] = {"strategy": self.strategy}

        if self.converters:
            result["converters"] = list(self.converters)
        if self.seed_cost:
            result["seed_cost"] = self.seed_cost
        if self.mime_types:
            result["mime_types"] = dict(self.mime_types)

        return result

    def to_yaml(self, path: Path | str) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path to output YAML file.
        """
        path = Path(path)
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
