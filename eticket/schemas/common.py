from pydantic import BaseModel, Field


class MessageSchema(BaseModel):
    """
    A generic message schema for API responses.
    """
    message: str = Field(..., description="A message describing the result of an operation.")
