"""Enumerations shared by recipe queries."""

from __future__ import annotations

from enum import StrEnum


class FilterMode(StrEnum):
    """How multiple tag filters combine."""

    OR = "OR"
    AND = "AND"


class SortOrder(StrEnum):
    """Recipe list orderings."""

    DATE_DESC = "dateDesc"
    DATE_ASC = "dateAsc"
    TITLE_ASC = "titleAsc"
    TITLE_DESC = "titleDesc"


class PermissionAction(StrEnum):
    """Actions checked against the recipe permission policy."""

    VIEW = "view"
    EDIT = "edit"
    DELETE = "delete"
