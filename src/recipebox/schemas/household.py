"""Household read models."""

from __future__ import annotations

from pydantic import Field

from recipebox.schemas.base import RecordModel


class HouseholdUser(RecordModel):
    """A member of a household."""

    id: str
    name: str | None = None


class Household(RecordModel):
    """A group of users sharing recipe visibility."""

    id: str
    name: str
    users: list[HouseholdUser] = Field(default_factory=list)

    @property
    def user_ids(self) -> list[str]:
        return [user.id for user in self.users]
