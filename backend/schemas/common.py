"""Common schema utilities and base classes."""

from datetime import datetime

from pydantic import BaseModel, field_serializer
from utils.serializers import serialize_utc_datetime as _serialize_utc_datetime


class TimestampSerializerMixin:
    """Mixin serializing created_at as a timezone-aware UTC datetime."""

    @field_serializer("created_at")
    def serialize_created_at(self, dt: datetime, _info):
        return _serialize_utc_datetime(dt)


class OperationResult(BaseModel):
    """Outcome of a create/update/delete call as reported to the client."""

    success: bool
    message: str


__all__ = [
    "OperationResult",
    "TimestampSerializerMixin",
]
