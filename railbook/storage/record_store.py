import logging
import threading
from contextlib import contextmanager
from typing import Generic, Iterator, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from railbook import models
from railbook.models import MAX_INT64
from railbook.admin.schemas import AdminCap
from railbook.bookings.schemas import Ticket
from railbook.database import execution_lock
from railbook.exceptions import StorageError
from railbook.stations.schemas import Station
from railbook.storage.id_allocator import IdAllocator
from railbook.trains.schemas import Train

logger = logging.getLogger(__name__)

# Maximum encoded size per record type, in bytes
ADMIN_MAX_SIZE = 512
STATION_MAX_SIZE = 512
TRAIN_MAX_SIZE = 1024
TICKET_MAX_SIZE = 512

# Every seat encodes to at least `"1":"Available",`, so a train with more
# seats than this can never fit TRAIN_MAX_SIZE
TRAIN_MAX_SEATS = TRAIN_MAX_SIZE // len('"1":"Available",')

RecordT = TypeVar("RecordT", bound=BaseModel)

class RecordTable(Generic[RecordT]):
    """
    Sorted map from a 64-bit id to a record, backed by one database table.
    
    Records cross the storage boundary as pydantic models. Their JSON
    encoding must fit within ``max_size`` bytes.
    """
    
    def __init__(self, db: Session, model, schema: Type[RecordT], max_size: int):
        self.db = db
        self.model = model
        self.schema = schema
        self.max_size = max_size
    
    def _encode(self, record: RecordT) -> dict:
        encoded = record.model_dump_json().encode("utf-8")
        if len(encoded) > self.max_size:
            raise StorageError(
                f"{self.schema.__name__} record is {len(encoded)} bytes, "
                f"limit is {self.max_size}"
            )
        return record.model_dump(mode="json")
    
    def _decode(self, row) -> RecordT:
        try:
            return self.schema.model_validate(row)
        except ValidationError as e:
            raise StorageError(f"Cannot decode {self.schema.__name__} {row.id}") from e
    
    def _flush(self):
        try:
            self.db.flush()
        except SQLAlchemyError as e:
            raise StorageError(f"Cannot write to {self.model.__tablename__}") from e
    
    @staticmethod
    def _in_range(record_id: int) -> bool:
        return 0 <= record_id <= MAX_INT64
    
    def get(self, record_id: int) -> Optional[RecordT]:
        if not self._in_range(record_id):
            return None
        row = self.db.get(self.model, record_id)
        if row is None:
            return None
        return self._decode(row)
    
    def insert(self, record_id: int, record: RecordT) -> Optional[RecordT]:
        """Store ``record`` under ``record_id``, returning the record it replaced"""
        if not self._in_range(record_id):
            raise StorageError(f"Id {record_id} is outside the storable range")
        values = self._encode(record)
        
        row = self.db.get(self.model, record_id)
        previous = self._decode(row) if row is not None else None
        if row is None:
            row = self.model(id=record_id)
            self.db.add(row)
        
        for column, value in values.items():
            if column != "id":
                setattr(row, column, value)
        
        self._flush()
        return previous
    
    def remove(self, record_id: int) -> Optional[RecordT]:
        if not self._in_range(record_id):
            return None
        row = self.db.get(self.model, record_id)
        if row is None:
            return None
        
        previous = self._decode(row)
        self.db.delete(row)
        self._flush()
        return previous
    
    def contains(self, record_id: int) -> bool:
        if not self._in_range(record_id):
            return False
        return self.db.query(self.model.id).filter(self.model.id == record_id).first() is not None
    
    def iterate(self) -> Iterator[Tuple[int, RecordT]]:
        """Yield (id, record) pairs in ascending id order"""
        for row in self.db.query(self.model).order_by(self.model.id).all():
            yield row.id, self._decode(row)

class RecordStore:
    """The four record tables plus the shared id counter, bound to one session"""
    
    def __init__(
        self,
        db: Session,
        lock: Optional[threading.RLock] = None,
        id_counter_start: Optional[int] = None
    ):
        self.db = db
        self.lock = lock if lock is not None else execution_lock
        self.ids = IdAllocator(db, start=id_counter_start)
        self.admins: RecordTable[AdminCap] = RecordTable(db, models.AdminCap, AdminCap, ADMIN_MAX_SIZE)
        self.stations: RecordTable[Station] = RecordTable(db, models.Station, Station, STATION_MAX_SIZE)
        self.trains: RecordTable[Train] = RecordTable(db, models.Train, Train, TRAIN_MAX_SIZE)
        self.tickets: RecordTable[Ticket] = RecordTable(db, models.Ticket, Ticket, TICKET_MAX_SIZE)
    
    def next_id(self) -> int:
        return self.ids.next_id()
    
    @contextmanager
    def transaction(self):
        """
        Run one booking operation: serialized against every other operation
        in the process and committed as a single unit.
        
        Any exception rolls back everything written inside the block.
        """
        with self.lock:
            try:
                yield self
                self.db.commit()
            except StorageError:
                logger.exception("Storage fault, rolling back operation")
                self.db.rollback()
                raise
            except SQLAlchemyError as e:
                logger.exception("Database error, rolling back operation")
                self.db.rollback()
                raise StorageError("Cannot commit operation") from e
            except Exception:
                self.db.rollback()
                raise
