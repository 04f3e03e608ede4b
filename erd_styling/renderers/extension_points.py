"""Host renderer extension points and the styling layer composed over them.

A host diagram renderer supplies base styles for tables, rows and clusters.
``StyledRenderer`` wraps such a host and layers name highlighting and
namespace cluster styles on top of its results, keeping every base key the
styling rules do not override.
"""
from __future__ import annotations

import threading
import weakref
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence

from erd_styling.clustering.cluster_style import style_for
from erd_styling.clustering.namespace_classifier import ClusteredEntity, NamespaceClassifier
from erd_styling.highlight.color_matcher import current_rule_source, highlight_row_style, highlight_table_style


class HostRenderer(Protocol):
    def table_style(self, entity: Any, attributes: Sequence[Any]) -> Dict[str, Any]:
        ...

    def row_style(self, entity: Any, attribute: Any) -> Dict[str, Any]:
        ...

    def cluster_attributes(self, entity: Any) -> Dict[str, Any]:
        ...


@dataclass
class Attribute:
    name: str
    type: str = "string"


@dataclass
class Entity:
    name: str
    attributes: List[Attribute] = field(default_factory=list)


class PlainRenderer:
    """Host renderer with empty base styles."""

    def table_style(self, entity: Any, attributes: Sequence[Any]) -> Dict[str, Any]:
        return {}

    def row_style(self, entity: Any, attribute: Any) -> Dict[str, Any]:
        return {}

    def cluster_attributes(self, entity: Any) -> Dict[str, Any]:
        return {"label": getattr(entity, "namespace", None) or getattr(entity, "name", "")}


class StyledRenderer:
    def __init__(
        self,
        host: HostRenderer,
        classifier: Optional[NamespaceClassifier] = None,
        *,
        rule_source: Optional[str] = None,
    ) -> None:
        self.host = host
        self.classifier = classifier
        self._rule_source = rule_source
        self._lock = threading.Lock()
        self._clustered: "weakref.WeakKeyDictionary[Any, ClusteredEntity]" = weakref.WeakKeyDictionary()
        # Values hold the entity, so its id stays valid while cached.
        self._clustered_by_id: Dict[int, ClusteredEntity] = {}

    @property
    def rule_source(self) -> str:
        """Color rules for this render, read from settings on first use."""
        if self._rule_source is None:
            self._rule_source = current_rule_source()
        return self._rule_source

    def clustered(self, entity: Any) -> Any:
        """Wrapper holding ``entity``'s namespace, the same one on every call."""
        if isinstance(entity, ClusteredEntity) or self.classifier is None:
            return entity
        with self._lock:
            try:
                wrapper = self._clustered.get(entity)
            except TypeError:
                wrapper = self._clustered_by_id.get(id(entity))
                if wrapper is None:
                    wrapper = self._clustered_by_id[id(entity)] = ClusteredEntity(entity, self.classifier)
                return wrapper
            if wrapper is None:
                wrapper = self._clustered[entity] = ClusteredEntity(entity, self.classifier)
            return wrapper

    def clustered_entities(self, entities: Iterable[Any]) -> List[Any]:
        return [self.clustered(entity) for entity in entities]

    def table_style(self, entity: Any, attributes: Sequence[Any]) -> Dict[str, Any]:
        return highlight_table_style(self.host.table_style(entity, attributes), attributes, self.rule_source)

    def row_style(self, entity: Any, attribute: Any) -> Dict[str, Any]:
        return highlight_row_style(self.host.row_style(entity, attribute), attribute, self.rule_source)

    def cluster_attributes(self, entity: Any) -> Dict[str, Any]:
        entity = self.clustered(entity)
        return style_for(getattr(entity, "namespace", None), self.host.cluster_attributes(entity))

    def __getattr__(self, item: str) -> Any:
        if item.startswith("_") or item == "host":
            raise AttributeError(item)
        return getattr(self.host, item)
