"""Common Schemas — the message envelope and the camelCase base model."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Response model serialized with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    """Every non-payload response (and every error) is {"message": ...}."""
    message: str


CREATED_MESSAGE = MessageResponse(message="Created Successfully")
