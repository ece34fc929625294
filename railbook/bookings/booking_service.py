import logging
import time
from typing import Callable, Optional, Tuple

from sqlalchemy.orm import Session

from railbook.admin.auth_service import AdminAuthService
from railbook.bookings.schemas import Ticket
from railbook.exceptions import (
    AlreadyBookedError, InvalidInputError, NotFoundError, StorageError, TrainDepartedError
)
from railbook.stations.schemas import Station
from railbook.stations.service import StationService
from railbook.storage.record_store import RecordStore, TRAIN_MAX_SEATS
from railbook.trains.schemas import BookingStatus, Train, TrainPayload

logger = logging.getLogger(__name__)

Clock = Callable[[], int]

class BookingService:
    """
    Booking engine for the rail network.

    Every public method is one serialized operation: it runs under the
    process-wide execution lock inside a single transaction, so either all of
    its writes are committed or none are.
    """

    def __init__(
        self,
        db: Session,
        clock: Optional[Clock] = None,
        store: Optional[RecordStore] = None
    ):
        self.db = db
        self.store = store if store is not None else RecordStore(db)
        self.clock = clock or time.time_ns
        self.auth_service = AdminAuthService(self.store)
        self.station_service = StationService(self.store)

    def init_system(self, admin_id: int, name: str, funds: int) -> Tuple[int, int]:
        """Register an admin and create a station, returning (admin_id, station_id)"""

        with self.store.transaction():
            self.auth_service.register_admin(admin_id)

            station_id = self.store.next_id()
            station = Station(id=station_id, name=name, funds=funds, train_ids=[])
            self.store.stations.insert(station_id, station)

        logger.info("System initialized with admin %s and station %s", admin_id, station_id)
        return admin_id, station_id

    def create_train(self, admin_id: int, payload: TrainPayload) -> Train:
        """Create a train with all seats available and attach it to its departure station"""

        with self.store.transaction():
            self.auth_service.require_admin(admin_id)

            # Self-loops are allowed, both names just have to resolve
            departure_exists = self.station_service.name_exists(payload.departure_station)
            arrival_exists = self.station_service.name_exists(payload.arrival_station)
            if not departure_exists or not arrival_exists:
                logger.warning(
                    "Rejected train %s -> %s: unknown station",
                    payload.departure_station, payload.arrival_station
                )
                raise InvalidInputError("Invalid station name(s)")

            if payload.seat_count > TRAIN_MAX_SEATS:
                raise StorageError(
                    f"Train with {payload.seat_count} seats exceeds the record size limit "
                    f"(at most {TRAIN_MAX_SEATS} seats)"
                )

            train_id = self.store.next_id()
            seats = {seat: BookingStatus.AVAILABLE for seat in range(1, payload.seat_count + 1)}

            train = Train(
                id=train_id,
                departure_station=payload.departure_station,
                arrival_station=payload.arrival_station,
                seats=seats,
                price=payload.price,
                schedule=payload.schedule
            )
            self.store.trains.insert(train_id, train)

            departure = self.station_service.find_by_name(payload.departure_station)
            if departure is not None:
                station_id, station = departure
                station.train_ids.append(train_id)
                self.store.stations.insert(station_id, station)
            else:
                logger.error("Train %s created without a departure station", train_id)

        logger.info(
            "Created train %s (%s -> %s, %s seats)",
            train_id, train.departure_station, train.arrival_station, payload.seat_count
        )
        return train

    def buy_ticket(self, train_id: int, owner: str, seat_number: int) -> Ticket:
        """Book one seat and issue a ticket for it"""

        with self.store.transaction():
            train = self.store.trains.get(train_id)
            if train is None:
                raise NotFoundError("Train not found")

            # TODO: reject purchases once train.schedule has passed, pending a
            # decision on the departure policy.

            # A seat number outside 1..seat_count has no entry and counts as taken
            if train.seats.get(seat_number) != BookingStatus.AVAILABLE:
                logger.warning("Seat %s on train %s is not available", seat_number, train_id)
                raise AlreadyBookedError("Seat already booked")

            train.seats[seat_number] = BookingStatus.BOOKED
            self.store.trains.insert(train_id, train)

            ticket_id = self.store.next_id()
            ticket = Ticket(
                id=ticket_id,
                train_id=train_id,
                owner=owner,
                seat_number=seat_number,
                launch_time=self.clock()
            )
            self.store.tickets.insert(ticket_id, ticket)

        logger.info("Issued ticket %s for seat %s on train %s", ticket_id, seat_number, train_id)
        return ticket

    def refund_ticket(self, ticket_id: int) -> str:
        """Release the ticket's seat and delete the ticket"""

        with self.store.transaction():
            ticket = self.store.tickets.get(ticket_id)
            if ticket is None:
                raise NotFoundError("Ticket not found")

            # launch_time is the purchase time, so this rejects any refund
            # requested once the clock has moved past the purchase.
            if ticket.launch_time <= self.clock():
                logger.warning("Refund of ticket %s rejected: train has departed", ticket_id)
                raise TrainDepartedError("Train has already departed")

            train = self.store.trains.get(ticket.train_id)
            if train is None:
                # The train was closed after the ticket was sold
                raise NotFoundError("Train not found")

            train.seats[ticket.seat_number] = BookingStatus.AVAILABLE
            self.store.trains.insert(ticket.train_id, train)
            self.store.tickets.remove(ticket_id)

        logger.info("Refunded ticket %s", ticket_id)
        return f"Ticket {ticket_id} refunded successfully"

    def close_train(self, admin_id: int, train_id: int) -> str:
        """Detach a train from its departure station and delete it; its tickets are kept"""

        with self.store.transaction():
            self.auth_service.require_admin(admin_id)

            train = self.store.trains.get(train_id)
            if train is None:
                raise NotFoundError("Train not found")

            departure = self.station_service.find_by_name(train.departure_station)
            if departure is not None:
                station_id, station = departure
                station.train_ids = [id_ for id_ in station.train_ids if id_ != train_id]
                self.store.stations.insert(station_id, station)

            self.store.trains.remove(train_id)

        logger.info("Closed train %s", train_id)
        return f"Train {train_id} closed successfully"
