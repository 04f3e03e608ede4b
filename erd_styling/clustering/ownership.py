"""Process-wide file ownership registry.

The registry maps project-relative file paths to ownership records, each with
an ``owner`` field. It is built from an optional provider exactly once per
process and never refreshed; without a provider it stays empty.
"""
from __future__ import annotations

import json
import logging
import threading
from typing import Any, Callable, Dict, Mapping, Optional

from erd_styling.clustering.labels import UNOWNED
from erd_styling.utils.config import ConfigurationError, load_settings
from erd_styling.utils.file_utils import read_text_file

logger = logging.getLogger(__name__)

OwnershipProvider = Callable[[], Mapping[str, Any]]


def _record_owner(record: Any) -> Optional[str]:
    if record is None:
        return None
    if isinstance(record, Mapping):
        return record.get("owner")
    return getattr(record, "owner", None)


class OwnershipRegistry:
    def __init__(self, provider: Optional[OwnershipProvider] = None) -> None:
        self._provider = provider
        self._lock = threading.Lock()
        self._ownerships: Optional[Mapping[str, Any]] = None

    @property
    def loaded(self) -> bool:
        return self._ownerships is not None

    def ownerships(self) -> Mapping[str, Any]:
        if self._ownerships is None:
            with self._lock:
                if self._ownerships is None:
                    self._ownerships = self._load()
        return self._ownerships

    def _load(self) -> Mapping[str, Any]:
        if self._provider is None:
            logger.info("No ownership provider configured; ownership registry is empty")
            return {}
        result = self._provider()
        if not isinstance(result, Mapping):
            logger.warning(
                "Ownership provider returned %s instead of a mapping; ignoring it",
                type(result).__name__,
            )
            return {}
        logger.info("Loaded ownership registry with %d entries", len(result))
        return dict(result)

    def owner_of(self, relpath: str) -> Optional[str]:
        """Owner of ``relpath``, or None when unknown or explicitly unowned."""
        owner = _record_owner(self.ownerships().get(relpath))
        if not owner or owner == UNOWNED:
            return None
        return str(owner)


def load_ownership_file(path: str) -> OwnershipProvider:
    """Provider reading ``{relpath: {"owner": name}}`` from a JSON file."""

    def _provider() -> Dict[str, Any]:
        try:
            data = json.loads(read_text_file(path))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigurationError(f"Unable to read ownership file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigurationError(f"Ownership file {path} must contain a JSON object")
        for relpath, record in data.items():
            if not isinstance(record, dict) or not isinstance(record.get("owner"), str):
                raise ConfigurationError(
                    f"Ownership record for {relpath!r} must be an object with a string 'owner'"
                )
        return data

    return _provider


_registry: Optional[OwnershipRegistry] = None
_provider_override: Optional[OwnershipProvider] = None
_registry_lock = threading.Lock()


def configure_ownership_provider(provider: Optional[OwnershipProvider]) -> None:
    """Install the provider used by the shared registry.

    Only effective before the shared registry is first used.
    """
    global _provider_override
    with _registry_lock:
        if _registry is not None:
            logger.warning("Ownership registry already initialised; provider change ignored")
            return
        _provider_override = provider


def _default_provider() -> Optional[OwnershipProvider]:
    if _provider_override is not None:
        return _provider_override
    ownership_file = load_settings().ownership_file
    if ownership_file:
        return load_ownership_file(ownership_file)
    return None


def get_ownership_registry() -> OwnershipRegistry:
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = OwnershipRegistry(_default_provider())
    return _registry


def reset_ownership_registry() -> None:
    """Forget the shared registry and any installed provider. Test helper."""
    global _registry, _provider_override
    with _registry_lock:
        _registry = None
        _provider_override = None
