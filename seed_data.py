#!/usr/bin/env python3

from railbook.bookings.booking_service import BookingService
from railbook.database import Base, SessionLocal, engine
from railbook.exceptions import BookingError
from railbook.trains.schemas import TrainPayload

SEED_ADMIN_ID = 1

STATIONS = [
    ("Central", 1000),
    ("North", 500),
    ("Harbour", 250),
]

TRAINS = [
    TrainPayload(departure_station="Central", arrival_station="North", seat_count=40, price=50, schedule=1767258000000000000),
    TrainPayload(departure_station="Central", arrival_station="Harbour", seat_count=24, price=35, schedule=1767261600000000000),
    TrainPayload(departure_station="North", arrival_station="Central", seat_count=40, price=50, schedule=1767265200000000000),
]

def create_seed_data():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    
    try:
        print("🚀 Creating seed data for the rail booking engine...")
        booking_service = BookingService(db)
        
        # 1. Stations, each registered by the seed admin
        print("Creating stations...")
        for name, funds in STATIONS:
            _, station_id = booking_service.init_system(SEED_ADMIN_ID, name, funds)
            print(f"   - {name} (station {station_id})")
        
        # 2. Trains
        print("Creating trains...")
        for payload in TRAINS:
            train = booking_service.create_train(SEED_ADMIN_ID, payload)
            print(f"   - train {train.id}: {train.departure_station} -> {train.arrival_station}, {len(train.seats)} seats")
        
        print("✅ Seed data created successfully!")
        print(f"   Admin ID: {SEED_ADMIN_ID}")
        
    except BookingError as e:
        print(f"❌ Error creating seed data: {e.msg}")
        raise
    finally:
        db.close()

if __name__ == "__main__":
    create_seed_data()
