from fastapi import APIRouter, Depends, HTTPException, status, Path, Query
from typing import List
from sqlalchemy.orm import Session

from railbook.bookings.booking_service import BookingService
from railbook.bookings.schemas import MessageResponse, Ticket
from railbook.bookings.ticket_service import TicketService
from railbook.database import get_db
from railbook.exceptions import InvalidInputError, NotFoundError, StorageError, UnAuthorizedError
from railbook.models import MAX_INT64
from railbook.storage.record_store import RecordStore
from railbook.trains.schemas import Train, TrainPayload
from railbook.trains.service import TrainService

router = APIRouter()

@router.post("/", response_model=Train)
def create_train(
    payload: TrainPayload,
    admin_id: int = Query(..., ge=0, le=MAX_INT64, description="Registered admin ID"),
    db: Session = Depends(get_db)
):
    """Create a train departing from an existing station"""
    
    booking_service = BookingService(db)
    
    try:
        return booking_service.create_train(admin_id, payload)
    except UnAuthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.msg
        )
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.msg
        )
    except StorageError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create train: {str(e)}"
        )

@router.get("/{train_id}", response_model=Train)
def view_train(train_id: int = Path(..., ge=0, le=MAX_INT64), db: Session = Depends(get_db)):
    """Get train by ID with its seat map"""
    try:
        return TrainService(RecordStore(db)).get_train(train_id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.msg
        )

@router.get("/{train_id}/tickets", response_model=List[Ticket])
def list_train_tickets(train_id: int = Path(..., ge=0, le=MAX_INT64), db: Session = Depends(get_db)):
    """List the live tickets issued for a train, including a closed one"""
    return TicketService(RecordStore(db)).get_tickets_for_train(train_id)

@router.post("/{train_id}/close", response_model=MessageResponse)
def close_train(
    train_id: int = Path(..., ge=0, le=MAX_INT64),
    admin_id: int = Query(..., ge=0, le=MAX_INT64, description="Registered admin ID"),
    db: Session = Depends(get_db)
):
    """Close a train and detach it from its departure station"""
    
    booking_service = BookingService(db)
    
    try:
        message = booking_service.close_train(admin_id, train_id)
    except UnAuthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.msg
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.msg
        )
    except StorageError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to close train: {str(e)}"
        )
    
    return MessageResponse(message=message)
