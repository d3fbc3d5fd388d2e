"""Permission schemas."""

from typing import Optional
from uuid import UUID

from pydantic import Field

from .base import BaseSchema


class Permission(BaseSchema):
    """Named capability; the name is unique across the service."""

    id: Optional[UUID] = Field(None, description="Permission identifier, assigned on creation")
    name: str = Field("", max_length=100, description="Unique permission name, e.g. 'accounts:create'")
    description: str = Field("", description="Human readable description")
