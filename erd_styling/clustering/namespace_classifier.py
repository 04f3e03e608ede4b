"""Group schema entities into namespaces by where their source file lives.

Heuristics run in a fixed order: internal package, file owner, external
library, then the default label. An entity whose source file cannot be found
is ``unknown``.
"""
from __future__ import annotations

import logging
import re
import threading
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, Union

from erd_styling.clustering.labels import (
    DEFAULT_NAMESPACE,
    UNKNOWN_NAMESPACE,
    gem_label,
    owner_label,
    pack_label,
)
from erd_styling.clustering.ownership import OwnershipRegistry, get_ownership_registry
from erd_styling.utils.config import Settings, load_settings
from erd_styling.utils.file_utils import relative_to_root

logger = logging.getLogger(__name__)

PathLookup = Callable[[str], Optional[str]]


def _root_patterns(roots: Iterable[str]) -> List[re.Pattern[str]]:
    # The captured segment is the directory right under the root.
    return [re.compile(re.escape(root.rstrip("/")) + r"/([^/]+)/") for root in roots if root.strip("/")]


def _first_segment(path: str, patterns: Sequence[re.Pattern[str]]) -> Optional[str]:
    for pattern in patterns:
        match = pattern.search(path)
        if match:
            return match.group(1)
    return None


class MappingPathLookup:
    """Entity name -> source path lookup over a plain mapping.

    Values may be a single path or a sequence of paths; the first one is used.
    """

    def __init__(self, paths: Mapping[str, Union[str, Sequence[str]]]) -> None:
        self._paths = dict(paths)

    def __call__(self, entity_name: str) -> Optional[str]:
        value = self._paths.get(entity_name)
        if not value:
            return None
        if isinstance(value, str):
            return value
        return next(iter(value), None)


class NamespaceClassifier:
    def __init__(
        self,
        path_lookup: PathLookup,
        *,
        packages_roots: Iterable[str],
        dependency_roots: Iterable[str],
        project_root: str,
        ownership: Optional[OwnershipRegistry] = None,
    ) -> None:
        self._path_lookup = path_lookup
        self._package_patterns = _root_patterns(packages_roots)
        self._dependency_patterns = _root_patterns(dependency_roots)
        self._project_root = project_root
        self._ownership = ownership

    @classmethod
    def from_settings(
        cls,
        path_lookup: PathLookup,
        settings: Optional[Settings] = None,
        ownership: Optional[OwnershipRegistry] = None,
    ) -> "NamespaceClassifier":
        settings = settings or load_settings()
        return cls(
            path_lookup,
            packages_roots=settings.packages_roots,
            dependency_roots=settings.dependency_roots,
            project_root=settings.project_root,
            ownership=ownership,
        )

    @property
    def ownership(self) -> OwnershipRegistry:
        # Resolved on first use so the shared registry is only built when needed.
        return self._ownership or get_ownership_registry()

    def pack_name(self, filepath: str) -> Optional[str]:
        return _first_segment(filepath, self._package_patterns)

    def gem_name(self, filepath: str) -> Optional[str]:
        return _first_segment(filepath, self._dependency_patterns)

    def code_owner(self, filepath: str) -> Optional[str]:
        return self.ownership.owner_of(relative_to_root(filepath, self._project_root))

    def classify_path(self, filepath: str) -> str:
        pack = self.pack_name(filepath)
        if pack:
            return pack_label(pack)
        owner = self.code_owner(filepath)
        if owner:
            return owner_label(owner)
        gem = self.gem_name(filepath)
        if gem:
            return gem_label(gem)
        return DEFAULT_NAMESPACE

    def namespace_for(self, entity_name: str) -> str:
        filepath = self._path_lookup(entity_name)
        if filepath is None:
            namespace = UNKNOWN_NAMESPACE
        else:
            namespace = self.classify_path(filepath)
        logger.debug("Entity %s resolved to namespace %r", entity_name, namespace)
        return namespace


class ClusteredEntity:
    """Host entity plus a namespace computed once for this instance.

    Other attribute access is forwarded to the wrapped entity.
    """

    def __init__(self, entity: Any, classifier: NamespaceClassifier) -> None:
        self._entity = entity
        self._classifier = classifier
        self._lock = threading.Lock()
        self._namespace: Optional[str] = None

    @property
    def entity(self) -> Any:
        return self._entity

    @property
    def name(self) -> str:
        return self._entity.name

    @property
    def namespace(self) -> str:
        if self._namespace is None:
            with self._lock:
                if self._namespace is None:
                    self._namespace = self._classifier.namespace_for(self.name)
        return self._namespace

    def __getattr__(self, item: str) -> Any:
        if item.startswith("_"):
            raise AttributeError(item)
        return getattr(self._entity, item)

    def __repr__(self) -> str:
        return f"ClusteredEntity({self.name!r})"
