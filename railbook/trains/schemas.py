from pydantic import BaseModel, Field
from typing import Dict
from enum import Enum

from railbook.models import MAX_INT64

class BookingStatus(str, Enum):
    """Per-seat booking state"""
    AVAILABLE = "Available"
    BOOKED = "Booked"

class TrainPayload(BaseModel):
    departure_station: str
    arrival_station: str
    seat_count: int = Field(..., ge=0, le=MAX_INT64, description="Seats are numbered 1..seat_count")
    price: int = Field(..., ge=0, le=MAX_INT64)
    schedule: int = Field(..., ge=0, le=MAX_INT64, description="Departure timestamp")

class Train(BaseModel):
    id: int
    departure_station: str
    arrival_station: str
    seats: Dict[int, BookingStatus] = {}
    price: int
    schedule: int
    
    class Config:
        from_attributes = True
