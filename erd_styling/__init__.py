"""Table highlighting and namespace clustering for ER diagrams."""
from erd_styling.clustering import ClusteredEntity, MappingPathLookup, NamespaceClassifier, style_for
from erd_styling.highlight import ColorPair, ColorRule, ConfigurationError, colors_for
from erd_styling.renderers.extension_points import StyledRenderer

__all__ = [
    "ClusteredEntity",
    "MappingPathLookup",
    "NamespaceClassifier",
    "style_for",
    "ColorPair",
    "ColorRule",
    "ConfigurationError",
    "colors_for",
    "StyledRenderer",
]
