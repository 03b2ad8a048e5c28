"""regclass - classification helpers for component registry clients."""

from regclass.classifiers import (
    ReferenceKind,
    SpecifierClassifier,
    classify_reference,
    collect_dependencies,
    get_dependency_from_module_specifier,
    is_local_file,
    is_universal_registry_item,
    is_url,
)
from regclass.models import RegistryFile, RegistryFileType, RegistryItem, RegistryItemType

__version__ = "0.1.0"

__all__ = [
    "ReferenceKind",
    "RegistryFile",
    "RegistryFileType",
    "RegistryItem",
    "RegistryItemType",
    "SpecifierClassifier",
    "classify_reference",
    "collect_dependencies",
    "get_dependency_from_module_specifier",
    "is_local_file",
    "is_universal_registry_item",
    "is_url",
]
