"""Cluster styling keyed on namespace labels."""
from __future__ import annotations

from typing import Any, Dict, Mapping, Tuple

from erd_styling.clustering.labels import GEM_PREFIX, OWNER_PREFIX, PACK_PREFIX


CLUSTER_DEFAULTS: Dict[str, Any] = {"margin": 10, "fontsize": 30}

NAMESPACE_STYLES: Tuple[Tuple[str, Dict[str, Any]], ...] = (
    (GEM_PREFIX, {"style": "filled", "color": "#FFEEEE"}),
    (PACK_PREFIX, {"style": "filled", "color": "#EEEEFF"}),
    (OWNER_PREFIX, {"style": "filled", "color": "#EEFFEE"}),
)


def namespace_style(namespace: str | None) -> Dict[str, Any]:
    for prefix, attrs in NAMESPACE_STYLES:
        if (namespace or "").startswith(prefix):
            return dict(attrs)
    return {}


def style_for(namespace: str | None, base_style: Mapping[str, Any] | None = None) -> Dict[str, Any]:
    """Merge base style, cluster defaults and the namespace fill, in that order."""
    style = dict(base_style or {})
    style.update(CLUSTER_DEFAULTS)
    style.update(namespace_style(namespace))
    return style
