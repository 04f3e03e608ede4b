"""Namespace label vocabulary shared by classification and cluster styling."""
from __future__ import annotations

PACK_PREFIX = "pack:"
OWNER_PREFIX = "owner:"
GEM_PREFIX = "gem:"

UNKNOWN_NAMESPACE = "unknown"
DEFAULT_NAMESPACE = "NO-PACK, NO-OWNER"

# Ownership value meaning "nobody owns this file".
UNOWNED = "UNOWNED"


def pack_label(name: str) -> str:
    return f"{PACK_PREFIX} {name}"


def owner_label(name: str) -> str:
    return f"{OWNER_PREFIX} {name}"


def gem_label(name: str) -> str:
    return f"{GEM_PREFIX} {name}"
