"""
Local registry item loader.

Reads a registry item definition from disk after checking size, extension
and basic JSON structure. This is the filesystem side of the local-file
branch; the classifiers themselves never touch the disk.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Union

from .classifiers.reference import LOCAL_FILE_EXTENSION, expand_local_path
from .exceptions import RegistryItemLoadError
from .models import RegistryItem

logger = logging.getLogger(__name__)


class RegistryItemLoader:
    """Loads registry items from local .json files"""

    MAX_FILE_SIZE = 5 * 1024 * 1024  # 5MB
    ALLOWED_EXTENSIONS = [LOCAL_FILE_EXTENSION]

    def check_file_size(self, file_path: Path) -> None:
        """Ensure the file exists and is within the size limit"""
        if not file_path.is_file():
            raise RegistryItemLoadError(
                f"File not found: {file_path}",
                path=str(file_path),
                reason="existence",
            )

        file_size = os.path.getsize(file_path)
        if file_size > self.MAX_FILE_SIZE:
            size_mb = file_size / (1024 * 1024)
            max_mb = self.MAX_FILE_SIZE / (1024 * 1024)
            raise RegistryItemLoadError(
                f"File size {size_mb:.2f}MB exceeds maximum {max_mb}MB",
                path=str(file_path),
                reason="size",
            )

    def check_file_format(self, file_path: Path) -> None:
        """Verify the file extension"""
        if not str(file_path).endswith(tuple(self.ALLOWED_EXTENSIONS)):
            raise RegistryItemLoadError(
                f"Invalid file extension. Allowed: {', '.join(self.ALLOWED_EXTENSIONS)}",
                path=str(file_path),
                reason="format",
            )

    def read_json(self, file_path: Path) -> Dict[str, Any]:
        """Parse the file and ensure it holds a JSON object"""
        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise RegistryItemLoadError(
                "Error reading file",
                path=str(file_path),
                reason="read",
                original_exception=e,
            ) from e

        if not content.strip():
            raise RegistryItemLoadError("File is empty", path=str(file_path), reason="json_structure")

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise RegistryItemLoadError(
                f"Invalid JSON syntax: {str(e)}",
                path=str(file_path),
                reason="json_structure",
                original_exception=e,
            ) from e

        if not isinstance(data, dict):
            raise RegistryItemLoadError(
                "Registry item must be a JSON object",
                path=str(file_path),
                reason="json_structure",
            )

        files = data.get("files")
        if files is not None and not isinstance(files, list):
            raise RegistryItemLoadError(
                "Registry item 'files' must be a JSON array",
                path=str(file_path),
                reason="json_structure",
            )

        return data

    def load(self, reference: Union[str, Path]) -> RegistryItem:
        """
        Load a registry item from a local file reference.

        Args:
            reference: Path to the item file; a leading ``~/`` is expanded

        Returns:
            The parsed registry item

        Raises:
            RegistryItemLoadError: if any check fails
        """
        file_path = expand_local_path(str(reference))

        self.check_file_format(file_path)
        self.check_file_size(file_path)
        data = self.read_json(file_path)

        item = RegistryItem.from_dict(data)
        logger.debug(f"Loaded registry item {item.name!r} with {len(item.files)} files from {file_path}")
        return item


def load_registry_item(reference: Union[str, Path]) -> RegistryItem:
    return RegistryItemLoader().load(reference)
