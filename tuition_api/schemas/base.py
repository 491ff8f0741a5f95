# tuition_api/schemas/base.py
"""Shared Pydantic configuration: snake_case in Python, camelCase on the wire."""
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Naive UTC; every timestamp column is TIMESTAMP WITHOUT TIME ZONE"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def reject_null(*fields: str):
    """Field validator refusing an explicit null for columns that cannot hold one"""
    def _not_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value
    return field_validator(*fields)(_not_null)


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
