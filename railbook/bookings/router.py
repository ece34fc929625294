from fastapi import APIRouter, Depends, HTTPException, status, Path
from sqlalchemy.orm import Session

from railbook.bookings.booking_service import BookingService
from railbook.bookings.schemas import MessageResponse, Ticket, TicketPayload
from railbook.bookings.ticket_service import TicketService
from railbook.database import get_db
from railbook.exceptions import AlreadyBookedError, NotFoundError, StorageError, TrainDepartedError
from railbook.models import MAX_INT64
from railbook.storage.record_store import RecordStore

router = APIRouter()

# Ticket Endpoints
@router.post("/tickets", response_model=Ticket)
def buy_ticket(
    payload: TicketPayload,
    db: Session = Depends(get_db)
):
    """Buy a ticket for one seat on a train"""
    
    booking_service = BookingService(db)
    
    try:
        return booking_service.buy_ticket(
            train_id=payload.train_id,
            owner=payload.owner,
            seat_number=payload.seat_number
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.msg
        )
    except AlreadyBookedError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=e.msg
        )
    except StorageError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to buy ticket: {str(e)}"
        )

@router.get("/tickets/{ticket_id}", response_model=Ticket)
def view_ticket(ticket_id: int = Path(..., ge=0, le=MAX_INT64), db: Session = Depends(get_db)):
    """Get ticket by ID"""
    try:
        return TicketService(RecordStore(db)).get_ticket(ticket_id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.msg
        )

@router.post("/tickets/{ticket_id}/refund", response_model=MessageResponse)
def refund_ticket(
    ticket_id: int = Path(..., ge=0, le=MAX_INT64),
    db: Session = Depends(get_db)
):
    """Refund a ticket and release its seat"""
    
    booking_service = BookingService(db)
    
    try:
        message = booking_service.refund_ticket(ticket_id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.msg
        )
    except TrainDepartedError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=e.msg
        )
    except StorageError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to refund ticket: {str(e)}"
        )
    
    return MessageResponse(message=message)
