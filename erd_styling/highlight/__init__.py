"""Name-based highlighting of tables and rows."""
from erd_styling.highlight.color_rule_schema import ColorPair, ColorRule, ConfigurationError, parse_color_rules
from erd_styling.highlight.color_matcher import (
    colors_for,
    highlight_row_style,
    highlight_table_style,
    row_color_for,
    table_color_for,
)

__all__ = [
    "ColorPair",
    "ColorRule",
    "ConfigurationError",
    "parse_color_rules",
    "colors_for",
    "highlight_row_style",
    "highlight_table_style",
    "row_color_for",
    "table_color_for",
]
