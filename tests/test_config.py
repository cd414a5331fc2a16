"""Tests for expansion configuration."""

from pathlib import Path

import pytest

from mimeforge.config import ExpansionConfig
from mimeforge.core.exceptions import ConfigError, UnsupportedStrategyError


class TestExpansionConfig:
    """Tests for ExpansionConfig."""

    def test_default_config(self):
        """Test default configuration values."""
        config = ExpansionConfig()
        assert config.strategy == "stack"
        assert config.converters == []
        assert config.seed_cost == 0
        assert config.mime_types == {}

    def test_from_dict(self):
        """Test building config from a dictionary."""
        config = ExpansionConfig.from_dict(
            {
                "strategy": "priority",
                "converters": ["csv-to-json", "json-to-yaml"],
                "seed_cost": 1,
                "mime_types": {"tsv": "text/csv", ".DAT": "text/plain"},
            }
        )

        assert config.strategy == "priority"
        assert config.converters == ["csv-to-json", "json-to-yaml"]
        assert config.seed_cost == 1
        assert config.mime_types == {".tsv": "text/csv", ".dat": "text/plain"}

    def test_from_dict_invalid_strategy(self):
        """Test that an unknown strategy is rejected on load."""
        with pytest.raises(UnsupportedStrategyError) as exc_info:
            ExpansionConfig.from_dict({"strategy": "random"})

        assert exc_info.value.strategy == "random"
        assert "stack" in exc_info.value.available_strategies

    def test_yaml_round_trip(self, tmp_path: Path):
        """Test saving and loading a YAML config."""
        path = tmp_path / "expand.yaml"
        config = ExpansionConfig(
            strategy="priority",
            converters=["yaml-to-json"],
            mime_types={".tsv": "text/csv"},
        )

        config.to_yaml(path)
        loaded = ExpansionConfig.from_yaml(path)

        assert loaded == config

    def test_from_empty_yaml(self, tmp_path: Path):
        """Test that an empty YAML file gives the defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert ExpansionConfig.from_yaml(path) == ExpansionConfig()

    @pytest.mark.parametrize("seed_cost", ["abc", None, True, [1]])
    def test_from_dict_invalid_seed_cost(self, seed_cost):
        """Test that a non-numeric seed cost is rejected on load."""
        with pytest.raises(ConfigError) as exc_info:
            ExpansionConfig.from_dict({"seed_cost": seed_cost})

        assert exc_info.value.field_name == "seed_cost"

    def test_float_seed_cost(self):
        """Test that a float seed cost is accepted."""
        assert ExpansionConfig.from_dict({"seed_cost": 0.5}).seed_cost == 0.5

    def test_to_dict_omits_defaults(self):
        """Test that default values are left out of the serialized form."""
        assert ExpansionConfig().to_dict() == {"strategy": "stack"}
