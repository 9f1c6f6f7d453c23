from datetime import datetime

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True)


class BaseReadSchema(BaseSchema):
    id: int
    created_at: datetime | None = None
