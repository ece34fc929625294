from fastapi import APIRouter, Depends, HTTPException, status, Path
from sqlalchemy.orm import Session

from railbook.database import get_db
from railbook.exceptions import NotFoundError
from railbook.models import MAX_INT64
from railbook.stations.schemas import Station
from railbook.stations.service import StationService
from railbook.storage.record_store import RecordStore

router = APIRouter()

@router.get("/{station_id}", response_model=Station)
def view_station(station_id: int = Path(..., ge=0, le=MAX_INT64), db: Session = Depends(get_db)):
    """Get station by ID, including the trains departing from it"""
    try:
        return StationService(RecordStore(db)).get_station(station_id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.msg
        )
