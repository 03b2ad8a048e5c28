"""
Tests for the regclass command line

Runs the Typer app through CliRunner with short inputs so table cells are
not wrapped.
"""

import json
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from typer.testing import CliRunner

from regclass.cli.app import app

runner = CliRunner()


class TestCli:
    """Test cases for CLI commands"""

    def test_deps(self):
        """Test that deps prints one dependency per line"""
        result = runner.invoke(app, ["deps", "lodash/get", "react", "@a/b/c", "lodash", "node:fs"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["lodash", "@a/b"]

    def test_deps_with_config(self, tmp_path):
        """Test that configured core packages are skipped"""
        config = tmp_path / "regclass.yaml"
        config.write_text("specifier:\n  extra_core_packages: [vue]\n")

        result = runner.invoke(app, ["--config", str(config), "deps", "vue/x", "clsx"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["clsx"]

    def test_missing_config(self, tmp_path):
        """Test that a missing config file exits with an error"""
        result = runner.invoke(app, ["--config", str(tmp_path / "nope.yaml"), "deps", "clsx"])
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_specifier_table(self):
        """Test the specifier table output"""
        result = runner.invoke(app, ["specifier", "clsx/x", "next"])
        assert result.exit_code == 0
        assert "clsx" in result.output
        assert "-" in result.output

    def test_reference_table(self):
        """Test the reference table output"""
        result = runner.invoke(app, ["reference", "a.json", "button"])
        assert result.exit_code == 0
        assert "local file" in result.output
        assert "registry name" in result.output

    def test_item_universal(self, tmp_path):
        """Test reporting a universal item"""
        path = tmp_path / "item.json"
        path.write_text(json.dumps({
            "name": "rules",
            "files": [{"path": "a.txt", "type": "registry:file", "target": "a.txt"}],
        }))

        result = runner.invoke(app, ["item", str(path)])
        assert result.exit_code == 0
        assert "Universal" in result.output

    def test_item_not_universal(self, tmp_path):
        """Test reporting an item that needs the per-type pipeline"""
        path = tmp_path / "item.json"
        path.write_text(json.dumps({
            "name": "button",
            "files": [{"path": "b.tsx", "type": "registry:ui"}],
        }))

        result = runner.invoke(app, ["item", str(path)])
        assert result.exit_code == 0
        assert "Not universal" in result.output

    def test_item_not_a_local_file(self):
        """Test that URLs and names are refused"""
        result = runner.invoke(app, ["item", "https://x.io/a.json"])
        assert result.exit_code == 1
        assert "Not a local registry item file" in result.output

    def test_item_load_error(self, tmp_path):
        """Test that load failures exit with an error"""
        path = tmp_path / "item.json"
        path.write_text("{broken")

        result = runner.invoke(app, ["item", str(path)])
        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output

    def test_item_files_not_an_array(self, tmp_path):
        """Test that a scalar files value is reported as a load error"""
        path = tmp_path / "item.json"
        path.write_text(json.dumps({"name": "bad", "files": 5}))

        result = runner.invoke(app, ["item", str(path)])
        assert result.exit_code == 1
        assert not isinstance(result.exception, TypeError)
        assert "must be a JSON array" in result.output

    def test_item_non_string_fields(self, tmp_path):
        """Test that non-string path and type values are shown as written"""
        path = tmp_path / "item.json"
        path.write_text(json.dumps({
            "name": "odd",
            "files": [{"path": 12345, "type": 678, "target": "[x]"}],
        }))

        result = runner.invoke(app, ["item", str(path)])
        assert result.exit_code == 0
        assert "12345" in result.output
        assert "678" in result.output
        assert "[x]" in result.output
        assert "Not universal" in result.output
