"""Query string parsing for the recipe retrieval endpoint.

Parameters are read leniently: integers use their leading digits
("20abc" is 20), unparseable values fall back to defaults, and unknown
filter or sort modes fall back to OR / dateDesc.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Final, TypeVar

from recipebox.schemas.enums import FilterMode, SortOrder


if TYPE_CHECKING:
    from collections.abc import Mapping

    from recipebox.core.config.settings import PaginationSettings


_LEADING_INT: Final = re.compile(r"^\s*([+-]?\d+)")

E = TypeVar("E", bound=StrEnum)


@dataclass(frozen=True, slots=True)
class RecipeQuery:
    """Parsed GET /api/recipes parameters."""

    recipe_id: str | None
    limit: int
    cursor: int
    search: str | None = None
    tags: list[str] | None = None
    filter_mode: FilterMode = FilterMode.OR
    sort_mode: SortOrder = SortOrder.DATE_DESC


def parse_leading_int(value: str | None, default: int) -> int:
    """Parse the leading integer of value, or return default."""
    if not value:
        return default
    match = _LEADING_INT.match(value)
    if match is None:
        return default
    return int(match.group(1))


def parse_tags(value: str | None) -> list[str] | None:
    """Split a comma separated tag list, dropping blanks.

    Returns None when no usable tag remains.
    """
    if not value:
        return None
    tags = [tag.strip() for tag in value.split(",")]
    tags = [tag for tag in tags if tag]
    return tags or None


def _parse_enum(enum_cls: type[E], value: str | None, default: E) -> E:
    if not value:
        return default
    try:
        return enum_cls(value)
    except ValueError:
        return default


def parse_recipe_query(
    params: Mapping[str, str],
    pagination: PaginationSettings,
) -> RecipeQuery:
    """Build a RecipeQuery from raw query parameters.

    limit is clamped to [1, max_limit] and a negative cursor becomes 0.
    """
    limit = parse_leading_int(params.get("limit"), pagination.default_limit)
    limit = max(1, min(limit, pagination.max_limit))
    cursor = max(0, parse_leading_int(params.get("cursor"), 0))

    filter_mode = _parse_enum(FilterMode, params.get("filterMode"), FilterMode.OR)
    sort_mode = _parse_enum(SortOrder, params.get("sortMode"), SortOrder.DATE_DESC)

    return RecipeQuery(
        recipe_id=params.get("id") or None,
        limit=limit,
        cursor=cursor,
        search=params.get("search") or None,
        tags=parse_tags(params.get("tags")),
        filter_mode=filter_mode,
        sort_mode=sort_mode,
    )
