"""
Reference classification.

Decides whether a reference string names a remote resource, a local
registry item file, or neither (a registry item name). A reference is never
both a URL and a local file: ``is_local_file`` rejects URLs before looking
at anything else.
"""

import logging
import os
from enum import Enum
from pathlib import Path
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

LOCAL_FILE_EXTENSION = ".json"
PATH_SEPARATORS = ("/", "\\")


class ReferenceKind(Enum):
    """Where a reference is fetched from"""
    URL = "url"
    LOCAL_FILE = "local_file"
    REGISTRY_NAME = "registry_name"


def is_url(reference: str) -> bool:
    """Check whether ``reference`` is an absolute URL with a network location."""
    if not isinstance(reference, str):
        return False

    try:
        parts = urlsplit(reference)
    except ValueError:
        # e.g. unbalanced IPv6 brackets
        return False
    return bool(parts.scheme and parts.netloc)


def is_local_file(reference: str) -> bool:
    """
    Check whether ``reference`` is a path to a local registry item file.

    Args:
        reference: Reference as given by the user

    Returns:
        True for non-URL references ending in ``.json``, including ``~/``
        paths. URLs, directory paths and names without the extension are
        not local files.
    """
    if not isinstance(reference, str):
        return False

    if is_url(reference):
        return False

    if reference.endswith(PATH_SEPARATORS):
        return False

    return reference.endswith(LOCAL_FILE_EXTENSION)


def classify_reference(reference: str) -> ReferenceKind:
    if is_url(reference):
        kind = ReferenceKind.URL
    elif is_local_file(reference):
        kind = ReferenceKind.LOCAL_FILE
    else:
        kind = ReferenceKind.REGISTRY_NAME

    logger.debug(f"Reference {reference!r} classified as {kind.value}")
    return kind


def expand_local_path(reference: str) -> Path:
    """Resolve a leading ``~/`` against the home directory."""
    if reference.startswith("~/"):
        return Path(os.path.expanduser("~")) / reference[2:]
    return Path(reference)
