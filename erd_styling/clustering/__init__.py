"""Namespace clustering of schema entities."""
from erd_styling.clustering.cluster_style import style_for
from erd_styling.clustering.namespace_classifier import ClusteredEntity, MappingPathLookup, NamespaceClassifier
from erd_styling.clustering.ownership import (
    OwnershipRegistry,
    configure_ownership_provider,
    get_ownership_registry,
    load_ownership_file,
)

__all__ = [
    "style_for",
    "ClusteredEntity",
    "MappingPathLookup",
    "NamespaceClassifier",
    "OwnershipRegistry",
    "configure_ownership_provider",
    "get_ownership_registry",
    "load_ownership_file",
]
