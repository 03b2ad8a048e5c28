"""
Data models for registry items.

Plain dataclasses built from registry JSON. Kind tags are stored as the raw
strings found in the JSON so that unknown kinds survive parsing; the enums
below list the kinds the registry defines.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping, Optional


class RegistryFileType(Enum):
    """Registry file kinds"""
    LIB = "registry:lib"
    BLOCK = "registry:block"
    COMPONENT = "registry:component"
    UI = "registry:ui"
    HOOK = "registry:hook"
    PAGE = "registry:page"
    FILE = "registry:file"
    THEME = "registry:theme"
    STYLE = "registry:style"
    ITEM = "registry:item"
    EXAMPLE = "registry:example"
    INTERNAL = "registry:internal"


# Registry items use the same set of kinds as their files
RegistryItemType = RegistryFileType


def _as_list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, (list, tuple)) else []


@dataclass
class RegistryFile:
    """One file inside a registry item"""
    path: str
    type: str
    target: Optional[str] = None
    content: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RegistryFile":
        return cls(
            path=data.get("path", ""),
            type=data.get("type", ""),
            target=data.get("target"),
            content=data.get("content"),
        )


@dataclass
class RegistryItem:
    """A named bundle of files distributed through the registry"""
    name: Optional[str] = None
    type: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    dependencies: List[str] = field(default_factory=list)
    dev_dependencies: List[str] = field(default_factory=list)
    registry_dependencies: List[str] = field(default_factory=list)
    files: List[RegistryFile] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RegistryItem":
        """Build a registry item from its JSON representation.

        Absent keys and list fields that are not JSON arrays fall back to
        empty values; ``files`` entries that are not objects are skipped.
        """
        files = _as_list(data.get("files"))
        return cls(
            name=data.get("name"),
            type=data.get("type"),
            title=data.get("title"),
            description=data.get("description"),
            dependencies=_as_list(data.get("dependencies")),
            dev_dependencies=_as_list(data.get("devDependencies")),
            registry_dependencies=_as_list(data.get("registryDependencies")),
            files=[RegistryFile.from_dict(f) for f in files if isinstance(f, Mapping)],
        )

