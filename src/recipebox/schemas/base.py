"""Base schema configuration for all Pydantic models.

- APIResponse: outgoing API bodies, camelCase, no unknown fields
- DownstreamResponse: bodies received from vendors, unknown fields ignored
- RecordModel: rows read from the database, snake_case in and camelCase out
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _BaseSchema(BaseModel):
    """Shared camelCase configuration. Do not use directly."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        serialize_by_alias=True,
    )


class APIResponse(_BaseSchema):
    """Base class for outgoing API response schemas."""

    model_config = ConfigDict(extra="forbid")


class RecordModel(_BaseSchema):
    """Base class for immutable records loaded from storage."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class DownstreamResponse(_BaseSchema):
    """Base class for responses received from external services."""

    model_config = ConfigDict(extra="ignore")
