"""Schema returned after creating a message."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class MessageCreatedResponse(BaseSchemaModel):
    """ID of the newly created message."""

    id: int = Field(..., description="Message ID")
