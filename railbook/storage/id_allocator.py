import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from railbook.config import settings
from railbook.exceptions import StorageError
from railbook.models import IdCounter

logger = logging.getLogger(__name__)

COUNTER_ROW_ID = 1

class IdAllocator:
    """Monotonic identifier counter shared by admins, stations, trains and tickets"""
    
    def __init__(self, db: Session, start: Optional[int] = None):
        self.db = db
        self.start = settings.ID_COUNTER_START if start is None else start
    
    def next_id(self) -> int:
        """Return the current counter value and advance the counter by one"""
        counter = self.db.get(IdCounter, COUNTER_ROW_ID)
        if counter is None:
            counter = IdCounter(id=COUNTER_ROW_ID, next_value=self.start)
            self.db.add(counter)
        
        current_value = counter.next_value
        counter.next_value = current_value + 1
        
        try:
            self.db.flush()
        except SQLAlchemyError as e:
            logger.exception("Cannot increment ID counter")
            raise StorageError("Cannot increment ID counter") from e
        
        return current_value
