"""
Module specifier classification.

Maps an import specifier to the package that has to be installed for it,
or ``None`` when the specifier resolves without installing anything
(runtime scheme prefixes and core packages).
"""

import logging
from typing import FrozenSet, Iterable, List, Optional

logger = logging.getLogger(__name__)

# Specifiers with these prefixes resolve through the runtime, never npm install
SCHEME_PREFIXES = frozenset({"node:", "jsr:", "npm:"})

# Always present in the target project
CORE_PACKAGES = frozenset({"react", "react-dom", "next"})


class SpecifierClassifier:
    """
    Classifier for module specifiers.

    Holds the scheme prefix and core package exclusion sets. The defaults
    cover the Node/Deno schemes and the React/Next.js runtime; extra entries
    can be supplied from configuration.
    """

    def __init__(
        self,
        extra_scheme_prefixes: Iterable[str] = (),
        extra_core_packages: Iterable[str] = (),
    ):
        self.scheme_prefixes: FrozenSet[str] = SCHEME_PREFIXES | frozenset(
            _as_scheme_prefix(p) for p in extra_scheme_prefixes
        )
        self.core_packages: FrozenSet[str] = CORE_PACKAGES | frozenset(extra_core_packages)

    def is_scheme_specifier(self, specifier: str) -> bool:
        return specifier.startswith(tuple(self.scheme_prefixes))

    def is_core_specifier(self, specifier: str) -> bool:
        return any(
            specifier == package or specifier.startswith(package + "/")
            for package in self.core_packages
        )

    def get_dependency(self, specifier: str) -> Optional[str]:
        """
        Get the dependency name required by a module specifier.

        Args:
            specifier: Module specifier as written in an import statement

        Returns:
            ``None`` for scheme-prefixed and core specifiers, otherwise the
            package name: ``@scope/name`` for scoped packages, the first path
            segment for everything else. Degenerate input gives a degenerate
            name (``"/"`` gives ``""``), which callers treat as no dependency.
        """
        if not isinstance(specifier, str):
            return None

        if self.is_scheme_specifier(specifier):
            logger.debug(f"Skipping scheme specifier {specifier!r}")
            return None

        if self.is_core_specifier(specifier):
            logger.debug(f"Skipping core package specifier {specifier!r}")
            return None

        parts = specifier.split("/")
        if specifier.startswith("@"):
            return "/".join(parts[:2])
        return parts[0]

    def collect_dependencies(self, specifiers: Iterable[str]) -> List[str]:
        """Unique dependency names for ``specifiers`` in first-seen order."""
        dependencies = []
        seen = set()
        for specifier in specifiers:
            dependency = self.get_dependency(specifier)
            if not dependency or not dependency.strip():
                continue
            if dependency not in seen:
                seen.add(dependency)
                dependencies.append(dependency)
        return dependencies


def _as_scheme_prefix(prefix: str) -> str:
    return prefix if prefix.endswith(":") else prefix + ":"


_default_classifier = SpecifierClassifier()


def get_dependency_from_module_specifier(specifier: str) -> Optional[str]:
    """Get the dependency name for ``specifier`` using the default exclusions."""
    return _default_classifier.get_dependency(specifier)


def collect_dependencies(specifiers: Iterable[str]) -> List[str]:
    """Collect dependency names for ``specifiers`` using the default exclusions."""
    return _default_classifier.collect_dependencies(specifiers)
