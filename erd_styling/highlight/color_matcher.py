"""Attribute highlighting: pick table and row colors from name rules."""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence

from erd_styling.highlight.color_rule_schema import (
    NO_COLORS,
    TRANSPARENT,
    ColorPair,
    ColorRule,
    parse_color_rules,
)
from erd_styling.utils.config import load_settings

logger = logging.getLogger(__name__)


def _attribute_name(attribute: Any) -> str:
    if isinstance(attribute, str):
        return attribute
    return str(getattr(attribute, "name", "") or "")


def current_rule_source() -> str:
    """Return the color rule JSON as configured right now."""
    return load_settings().colors


def resolve_rules(rule_source: Optional[str] = None) -> Sequence[ColorRule]:
    if rule_source is None:
        rule_source = current_rule_source()
    return parse_color_rules(rule_source)


def match_colors(name: str, rules: Iterable[ColorRule]) -> ColorPair:
    for index, rule in enumerate(rules):
        if rule.matches(name):
            logger.debug("Column %r matched color rule #%d", name, index)
            return rule.colors
    return NO_COLORS


def colors_for(attribute: Any, rule_source: Optional[str] = None) -> ColorPair:
    """Colors for one attribute; first matching rule wins.

    ``rule_source`` defaults to the ERD_COLORS value at call time.
    """
    return match_colors(_attribute_name(attribute), resolve_rules(rule_source))


def table_color_for(attributes: Iterable[Any], rule_source: Optional[str] = None) -> Optional[str]:
    """First non-transparent table color across ``attributes``, in order."""
    rules = resolve_rules(rule_source)
    for attribute in attributes:
        color = match_colors(_attribute_name(attribute), rules).table_color
        if color != TRANSPARENT:
            return color
    return None


def row_color_for(attribute: Any, rule_source: Optional[str] = None) -> str:
    return colors_for(attribute, rule_source).row_color


def highlight_table_style(
    base_style: Mapping[str, Any],
    attributes: Iterable[Any],
    rule_source: Optional[str] = None,
) -> Dict[str, Any]:
    style = dict(base_style or {})
    color = table_color_for(attributes, rule_source)
    if color is not None:
        style["bgcolor"] = color
    return style


def highlight_row_style(
    base_style: Mapping[str, Any],
    attribute: Any,
    rule_source: Optional[str] = None,
) -> Dict[str, Any]:
    style = dict(base_style or {})
    style["bgcolor"] = row_color_for(attribute, rule_source)
    return style
