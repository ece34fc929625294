from pydantic import BaseModel, Field

from railbook.models import MAX_INT64
from railbook.stations.schemas import StationPayload

class AdminCap(BaseModel):
    """Capability record; presence in the admins table grants admin rights"""
    admin_id: int
    
    class Config:
        from_attributes = True

class InitSystemRequest(StationPayload):
    admin_id: int = Field(..., ge=0, le=MAX_INT64)

class InitSystemResponse(BaseModel):
    message: str
    admin_id: int
    station_id: int
