from pydantic import BaseModel, Field
from typing import List

from railbook.models import MAX_INT64

class StationPayload(BaseModel):
    name: str
    funds: int = Field(0, ge=0, le=MAX_INT64)

class Station(BaseModel):
    id: int
    name: str
    funds: int = 0
    train_ids: List[int] = []
    
    class Config:
        from_attributes = True
