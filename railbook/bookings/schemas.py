from pydantic import BaseModel, Field

from railbook.models import MAX_INT64

class TicketPayload(BaseModel):
    """Request to buy a single seat on a train"""
    train_id: int = Field(..., ge=0, le=MAX_INT64)
    owner: str
    seat_number: int = Field(..., ge=0, le=MAX_INT64)

class Ticket(BaseModel):
    """A sold seat"""
    id: int
    train_id: int
    owner: str
    seat_number: int
    launch_time: int = Field(..., description="Timestamp recorded at purchase")
    
    class Config:
        from_attributes = True

class MessageResponse(BaseModel):
    message: str
