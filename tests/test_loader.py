"""
Tests for the local registry item loader

Tests existence, extension, size and JSON structure checks, and home
directory expansion.
"""

import json
import os
import sys
from unittest.mock import patch

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from regclass.exceptions import RegistryItemLoadError
from regclass.loader import RegistryItemLoader, load_registry_item


ITEM = {
    "name": "cursor-rules",
    "type": "registry:item",
    "files": [
        {"path": "rules.txt", "type": "registry:file", "target": "~/.cursor/rules/react.txt"},
    ],
}


class TestRegistryItemLoader:
    """Test cases for loading registry items from disk"""

    def setup_method(self):
        """Setup for each test"""
        self.loader = RegistryItemLoader()

    def test_load_valid_item(self, tmp_path):
        """Test loading a well-formed item"""
        path = tmp_path / "cursor-rules.json"
        path.write_text(json.dumps(ITEM))

        item = self.loader.load(str(path))
        assert item.name == "cursor-rules"
        assert item.files[0].target == "~/.cursor/rules/react.txt"

    def test_load_home_relative(self, tmp_path):
        """Test that ~/ references are read from the home directory"""
        (tmp_path / "registry").mkdir()
        (tmp_path / "registry" / "item.json").write_text(json.dumps(ITEM))

        with patch.dict(os.environ, {"HOME": str(tmp_path)}):
            item = load_registry_item("~/registry/item.json")

        assert item.name == "cursor-rules"

    def test_file_not_found(self, tmp_path):
        """Test loading a missing file"""
        with pytest.raises(RegistryItemLoadError) as exc_info:
            self.loader.load(str(tmp_path / "missing.json"))
        assert exc_info.value.reason == "existence"
        assert "File not found" in str(exc_info.value)

    def test_invalid_extension(self, tmp_path):
        """Test that non-.json files are rejected"""
        path = tmp_path / "item.txt"
        path.write_text(json.dumps(ITEM))

        with pytest.raises(RegistryItemLoadError) as exc_info:
            self.loader.load(path)
        assert exc_info.value.reason == "format"
        assert ".json" in str(exc_info.value)

    def test_file_too_large(self, tmp_path):
        """Test that oversized files are rejected"""
        path = tmp_path / "item.json"
        path.write_text(json.dumps(ITEM))
        self.loader.MAX_FILE_SIZE = 10

        with pytest.raises(RegistryItemLoadError) as exc_info:
            self.loader.load(path)
        assert exc_info.value.reason == "size"
        assert "exceeds maximum" in str(exc_info.value)

    def test_empty_file(self, tmp_path):
        """Test that empty files are rejected"""
        path = tmp_path / "item.json"
        path.write_text("   \n")

        with pytest.raises(RegistryItemLoadError) as exc_info:
            self.loader.load(path)
        assert "File is empty" in str(exc_info.value)

    def test_invalid_json(self, tmp_path):
        """Test that malformed JSON is rejected"""
        path = tmp_path / "item.json"
        path.write_text("{not json")

        with pytest.raises(RegistryItemLoadError) as exc_info:
            self.loader.load(path)
        assert "Invalid JSON syntax" in str(exc_info.value)
        assert exc_info.value.original_exception is not None

    def test_json_array_rejected(self, tmp_path):
        """Test that a top-level array is not a registry item"""
        path = tmp_path / "item.json"
        path.write_text("[]")

        with pytest.raises(RegistryItemLoadError) as exc_info:
            self.loader.load(path)
        assert "must be a JSON object" in str(exc_info.value)

    def test_files_not_an_array(self, tmp_path):
        """Test that a scalar files value is rejected"""
        path = tmp_path / "item.json"
        path.write_text(json.dumps({"name": "bad", "files": 5}))

        with pytest.raises(RegistryItemLoadError) as exc_info:
            self.loader.load(path)
        assert exc_info.value.reason == "json_structure"
        assert "must be a JSON array" in str(exc_info.value)

    def test_null_files_allowed(self, tmp_path):
        """Test that a null files value loads as an item without files"""
        path = tmp_path / "item.json"
        path.write_text(json.dumps({"name": "empty", "files": None}))

        assert self.loader.load(path).files == []

    def test_directory_rejected(self, tmp_path):
        """Test that a directory named like a registry file is rejected"""
        (tmp_path / "dir.json").mkdir()

        with pytest.raises(RegistryItemLoadError) as exc_info:
            self.loader.load(tmp_path / "dir.json")
        assert exc_info.value.reason == "existence"
