from pydantic import BaseModel, ConfigDict

class BaseSchema(BaseModel):
    """Base schema for the immutable option models."""
    model_config = ConfigDict(frozen=True, extra="forbid")
