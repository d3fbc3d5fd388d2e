"""Base Pydantic schemas shared by all wire models."""

from typing import Any, Dict

from pydantic import BaseModel


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    class Config:
        from_attributes = True
        populate_by_name = True
        str_strip_whitespace = True
        validate_assignment = True

    def to_payload(self, **kwargs: Any) -> Dict[str, Any]:
        """JSON-ready dict using wire aliases; UUIDs and datetimes as strings."""
        return self.model_dump(mode="json", by_alias=True, **kwargs)
