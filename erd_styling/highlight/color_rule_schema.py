"""Color rule schema - validated form of the ERD_COLORS configuration."""
from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, List, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from erd_styling.utils.config import ConfigurationError


TRANSPARENT = "transparent"


@dataclass(frozen=True)
class ColorPair:
    table_color: str = TRANSPARENT
    row_color: str = TRANSPARENT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "table_color": self.table_color,
            "row_color": self.row_color,
        }


NO_COLORS = ColorPair()


class ColorRule(BaseModel):
    """One highlight rule.

    A column matches when its name is listed in ``name_in``, contains any of
    ``name_includes``, ends with any of ``name_ends_with`` or starts with any of
    ``name_starts_with``. A rule without terms matches nothing.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    name_in: Tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("name_in", "name_equals"),
    )
    name_starts_with: Tuple[str, ...] = ()
    name_ends_with: Tuple[str, ...] = ()
    name_includes: Tuple[str, ...] = ()
    table_color: str = Field(default=TRANSPARENT, min_length=1)
    row_color: str = Field(default=TRANSPARENT, min_length=1)

    @property
    def colors(self) -> ColorPair:
        return ColorPair(table_color=self.table_color, row_color=self.row_color)

    def matches(self, name: str) -> bool:
        return (
            any(name == term for term in self.name_in)
            or any(term in name for term in self.name_includes)
            or any(name.endswith(term) for term in self.name_ends_with)
            or any(name.startswith(term) for term in self.name_starts_with)
        )


_RULES_ADAPTER = TypeAdapter(List[ColorRule])


@lru_cache(maxsize=32)
def parse_color_rules(source: str | None) -> Tuple[ColorRule, ...]:
    """Parse a JSON array of color rules.

    Blank or missing input is an empty rule set. Results are cached by source
    text, so a changed configuration value is always parsed afresh.
    """
    if source is None or not source.strip():
        return ()
    try:
        data = json.loads(source)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Color rules are not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise ConfigurationError("Color rules must be a JSON array of objects")
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ConfigurationError(f"Color rule #{index} must be a JSON object")
    try:
        rules = _RULES_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid color rule: {exc}") from exc
    return tuple(rules)
