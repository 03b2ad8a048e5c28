"""
Registry item shape classification.

A registry item is universal when every file is a plain ``registry:file``
with an explicit target, so the installer can copy each file to its target
without the per-type install pipeline. Targets are not validated here.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from regclass.models import RegistryFileType

logger = logging.getLogger(__name__)


def _get(obj: Any, key: str) -> Any:
    """Read ``key`` from a mapping (raw JSON) or attribute (model)."""
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def _has_target(target: Optional[Any]) -> bool:
    # " " and "0" are present; only None and "" are absent
    return isinstance(target, str) and target != ""


def _is_file_type(file_type: Any) -> bool:
    if isinstance(file_type, RegistryFileType):
        file_type = file_type.value
    return file_type == RegistryFileType.FILE.value


def is_universal_registry_item(item: Any) -> bool:
    """
    Check whether a registry item can be installed by copying files to targets.

    Args:
        item: ``RegistryItem``, a mapping parsed from registry JSON, or None

    Returns:
        True only if the item has at least one file and every file has type
        ``registry:file`` and a non-empty target. The item's own type is
        not considered.
    """
    if item is None:
        return False

    files = _get(item, "files")
    if not isinstance(files, (list, tuple)) or not files:
        return False

    for registry_file in files:
        if not _is_file_type(_get(registry_file, "type")):
            logger.debug(f"File {_get(registry_file, 'path')!r} is not registry:file")
            return False
        if not _has_target(_get(registry_file, "target")):
            logger.debug(f"File {_get(registry_file, 'path')!r} has no target")
            return False

    return True
