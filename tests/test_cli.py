"""Tests for the CLI."""

import json
from pathlib import Path

import numpy as np
import yaml
from typer.testing import CliRunner

from mimeforge.cli import app, detect_mime_type

runner = CliRunner()


class TestCLI:
    """Tests for CLI commands."""

    def test_version_command(self):
        """Test the version command."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.stdout

    def test_converters_command(self):
        """Test the converters command."""
        result = runner.invoke(app, ["converters"])
        assert result.exit_code == 0
        assert "csv-to-json" in result.stdout
        assert "json-to-yaml" in result.stdout

    def test_help_command(self):
        """Test help output."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "expand" in result.stdout
        assert "convert" in result.stdout
        assert "converters" in result.stdout


class TestExpandCommand:
    """Tests for the expand command."""

    def test_expand_json(self, csv_file: Path):
        """Test listing reachable mimetypes as JSON."""
        result = runner.invoke(app, ["expand", str(csv_file), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "text/csv": 0,
            "application/json": 1,
            "application/x-numpy": 2,
            "application/x-yaml": 2,
        }

    def test_expand_table(self, csv_file: Path):
        """Test the table output."""
        result = runner.invoke(app, ["expand", str(csv_file)])

        assert result.exit_code == 0
        assert "application/json" in result.stdout
        assert "text/csv" in result.stdout

    def test_expand_priority_strategy(self, csv_file: Path):
        """Test choosing the priority strategy."""
        result = runner.invoke(app, ["expand", str(csv_file), "--strategy", "priority", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["application/x-yaml"] == 2

    def test_expand_invalid_strategy(self, csv_file: Path):
        """Test that an unknown strategy fails."""
        result = runner.invoke(app, ["expand", str(csv_file), "--strategy", "bfs"])
        assert result.exit_code == 1

    def test_expand_nonexistent_path(self):
        """Test expand with non-existent path."""
        result = runner.invoke(app, ["expand", "/nonexistent/data.csv"])
        assert result.exit_code != 0

    def test_expand_unknown_suffix(self, tmp_path: Path):
        """Test that an undetectable mimetype fails."""
        path = tmp_path / "data.zzqx"
        path.write_text("?")

        result = runner.invoke(app, ["expand", str(path)])
        assert result.exit_code == 1

    def test_expand_mime_type_override(self, tmp_path: Path):
        """Test forcing the input mimetype."""
        path = tmp_path / "data.txt"
        path.write_text("a\n1\n")

        result = runner.invoke(app, ["expand", str(path), "--mime-type", "text/csv", "--json"])

        assert result.exit_code == 0
        assert "application/json" in json.loads(result.stdout)

    def test_expand_with_config(self, tmp_path: Path):
        """Test suffix overrides and converter selection from a config file."""
        data = tmp_path / "data.tsv"
        data.write_text("a\n1\n")
        config = tmp_path / "expand.yaml"
        config.write_text(
            yaml.safe_dump(
                {
                    "converters": ["csv-to-json"],
                    "seed_cost": 2,
                    "mime_types": {".tsv": "text/csv"},
                }
            )
        )

        result = runner.invoke(app, ["expand", str(data), "--config", str(config), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"text/csv": 2, "application/json": 3}

    def test_expand_invalid_seed_cost(self, csv_file: Path, tmp_path: Path):
        """Test that a non-numeric seed cost in the config fails cleanly."""
        config = tmp_path / "expand.yaml"
        config.write_text("seed_cost: abc\n")

        result = runner.invoke(app, ["expand", str(csv_file), "--config", str(config)])

        assert result.exit_code == 1
        assert "seed_cost" in result.stdout

    def test_expand_missing_config(self, csv_file: Path, tmp_path: Path):
        """Test that a missing config file fails."""
        result = runner.invoke(
            app, ["expand", str(csv_file), "--config", str(tmp_path / "missing.yaml")]
        )
        assert result.exit_code == 1

    def test_expand_verbose(self, csv_file: Path):
        """Test that verbose logging does not change the outcome."""
        result = runner.invoke(app, ["--verbose", "expand", str(csv_file), "--json"])
        assert result.exit_code == 0


class TestConvertCommand:
    """Tests for the convert command."""

    def test_convert_to_stdout(self, csv_file: Path):
        """Test writing a converted representation to stdout."""
        result = runner.invoke(app, ["convert", str(csv_file), "--to", "application/x-yaml"])

        assert result.exit_code == 0
        assert yaml.safe_load(result.stdout) == [{"x": "1", "y": "2"}, {"x": "3", "y": "4"}]

    def test_convert_to_file(self, csv_file: Path, tmp_path: Path):
        """Test writing a converted representation to a file."""
        output = tmp_path / "points.json"

        result = runner.invoke(
            app, ["convert", str(csv_file), "--to", "application/json", "-o", str(output)]
        )

        assert result.exit_code == 0
        assert json.loads(output.read_text()) == [{"x": "1", "y": "2"}, {"x": "3", "y": "4"}]

    def test_convert_to_numpy(self, csv_file: Path, tmp_path: Path):
        """Test saving an array with numpy."""
        output = tmp_path / "points.npy"

        result = runner.invoke(
            app, ["convert", str(csv_file), "--to", "application/x-numpy", "-o", str(output)]
        )

        assert result.exit_code == 0
        np.testing.assert_array_equal(np.load(output), np.array([[1.0, 2.0], [3.0, 4.0]]))

    def test_convert_numpy_requires_output(self, csv_file: Path):
        """Test that arrays are not printed to stdout."""
        result = runner.invoke(app, ["convert", str(csv_file), "--to", "application/x-numpy"])
        assert result.exit_code == 1

    def test_convert_from_numpy(self, tmp_path: Path):
        """Test seeding from a .npy file."""
        path = tmp_path / "grid.npy"
        np.save(path, np.array([[1, 2], [3, 4]]))

        result = runner.invoke(app, ["convert", str(path), "--to", "application/json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [[1, 2], [3, 4]]

    def test_convert_missing_output_directory(self, csv_file: Path, tmp_path: Path):
        """Test that an unwritable output path fails cleanly."""
        output = tmp_path / "missing" / "points.json"

        result = runner.invoke(
            app, ["convert", str(csv_file), "--to", "application/json", "-o", str(output)]
        )

        assert result.exit_code == 1
        assert "Error writing output" in result.stdout
        assert not output.exists()

    def test_convert_numpy_missing_output_directory(self, csv_file: Path, tmp_path: Path):
        """Test that a failed numpy save fails cleanly."""
        output = tmp_path / "missing" / "points.npy"

        result = runner.invoke(
            app, ["convert", str(csv_file), "--to", "application/x-numpy", "-o", str(output)]
        )

        assert result.exit_code == 1
        assert "Error writing output" in result.stdout

    def test_convert_unreachable(self, csv_file: Path):
        """Test requesting a mimetype no converter produces."""
        result = runner.invoke(app, ["convert", str(csv_file), "--to", "image/png"])

        assert result.exit_code == 1
        assert "image/png" in result.stdout

    def test_convert_materialization_failure(self, text_csv_file: Path):
        """Test that a failing conversion is reported."""
        result = runner.invoke(
            app, ["convert", str(text_csv_file), "--to", "application/x-numpy", "-o", "out.npy"]
        )

        assert result.exit_code == 1
        assert "Failed to convert" in result.stdout


class TestDetectMimeType:
    """Tests for suffix-based mimetype detection."""

    def test_builtin_suffixes(self):
        """Test the built-in suffix table."""
        assert detect_mime_type(Path("a.csv")) == "text/csv"
        assert detect_mime_type(Path("a.YML")) == "application/x-yaml"
        assert detect_mime_type(Path("a.npy")) == "application/x-numpy"

    def test_overrides_win(self):
        """Test that config overrides take precedence."""
        assert detect_mime_type(Path("a.csv"), {".csv": "text/plain"}) == "text/plain"

    def test_mimetypes_fallback(self):
        """Test falling back to the mimetypes module."""
        assert detect_mime_type(Path("a.html")) == "text/html"
