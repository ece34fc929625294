from sqlalchemy import Column, BigInteger, Text, JSON

from railbook.database import Base

# Largest value a BigInteger column holds
MAX_INT64 = 2**63 - 1

# ================================
# Identifier Counter
# ================================
class IdCounter(Base):
    __tablename__ = "id_counter"
    
    id = Column(BigInteger, primary_key=True)
    next_value = Column(BigInteger, nullable=False)

# ================================
# Admins
# ================================
class AdminCap(Base):
    __tablename__ = "admins"
    
    id = Column(BigInteger, primary_key=True)
    admin_id = Column(BigInteger, nullable=False)

# ================================
# Stations
# ================================
class Station(Base):
    __tablename__ = "stations"
    
    id = Column(BigInteger, primary_key=True)
    name = Column(Text, nullable=False, index=True)
    funds = Column(BigInteger, nullable=False, default=0)
    train_ids = Column(JSON, nullable=False, default=list)

# ================================
# Trains
# ================================
class Train(Base):
    __tablename__ = "trains"
    
    id = Column(BigInteger, primary_key=True)
    departure_station = Column(Text, nullable=False, index=True)
    arrival_station = Column(Text, nullable=False)
    # seat number (as string key) -> booking status
    seats = Column(JSON, nullable=False, default=dict)
    price = Column(BigInteger, nullable=False)
    schedule = Column(BigInteger, nullable=False)

# ================================
# Tickets
# ================================
class Ticket(Base):
    __tablename__ = "tickets"
    
    id = Column(BigInteger, primary_key=True)
    train_id = Column(BigInteger, nullable=False, index=True)
    owner = Column(Text, nullable=False)
    seat_number = Column(BigInteger, nullable=False)
    launch_time = Column(BigInteger, nullable=False)
