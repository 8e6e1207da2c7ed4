"""Folder-related schemas."""

from datetime import datetime

from pydantic import BaseModel

from schemas.common import TimestampSerializerMixin


class FolderBase(BaseModel):
    name: str
    description: str = ""


class FolderCreate(FolderBase):
    pass


class FolderUpdate(FolderBase):
    id: int


class Folder(TimestampSerializerMixin, FolderBase):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True


__all__ = [
    "FolderBase",
    "FolderCreate",
    "FolderUpdate",
    "Folder",
]
