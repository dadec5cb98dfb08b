import uuid
from pydantic import BaseModel, ConfigDict


class Survivor(BaseModel):
    id: uuid.UUID
    num: int
    name: str
    model_config = ConfigDict(from_attributes=True, frozen=True)
