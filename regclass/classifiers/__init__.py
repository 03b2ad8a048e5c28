"""
Classifiers for registry references, import specifiers and registry items.

All classifiers are pure functions: no I/O, no shared mutable state, and no
exceptions for malformed input.
"""

from .reference import ReferenceKind, classify_reference, is_local_file, is_url
from .registry_item import is_universal_registry_item
from .specifier import (
    SpecifierClassifier,
    collect_dependencies,
    get_dependency_from_module_specifier,
)

__all__ = [
    "ReferenceKind",
    "SpecifierClassifier",
    "classify_reference",
    "collect_dependencies",
    "get_dependency_from_module_specifier",
    "is_local_file",
    "is_universal_registry_item",
    "is_url",
]
