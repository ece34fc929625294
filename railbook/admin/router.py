from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from railbook.admin.schemas import InitSystemRequest, InitSystemResponse
from railbook.bookings.booking_service import BookingService
from railbook.database import get_db
from railbook.exceptions import StorageError

router = APIRouter()

@router.post("/init", response_model=InitSystemResponse)
def init_system(
    request: InitSystemRequest,
    db: Session = Depends(get_db)
):
    """Register an admin and create a station"""
    
    booking_service = BookingService(db)
    
    try:
        admin_id, station_id = booking_service.init_system(
            admin_id=request.admin_id,
            name=request.name,
            funds=request.funds
        )
    except StorageError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to initialize system: {str(e)}"
        )
    
    return InitSystemResponse(
        message=f"System initialized with admin {admin_id} and station {station_id}",
        admin_id=admin_id,
        station_id=station_id
    )
