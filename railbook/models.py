import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Numeric, JSON, CheckConstraint, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from railbook.database import Base


def _uuid() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

# ================================
# Identity & Profiles
# ================================
class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_uuid)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    profile = relationship("Profile", back_populates="user", uselist=False)

class Profile(Base):
    __tablename__ = "profiles"

    id = Column(String(36), ForeignKey("users.id"), primary_key=True)
    full_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(20))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="profile")

class RevokedToken(Base):
    __tablename__ = "revoked_tokens"

    jti = Column(String(36), primary_key=True)
    revoked_at = Column(DateTime(timezone=True), default=_utcnow)

# ================================
# Trains
# ================================
class Train(Base):
    __tablename__ = "trains"
    __table_args__ = (
        CheckConstraint("base_fare > 0", name="ck_trains_base_fare_positive"),
    )

    id = Column(String(36), primary_key=True, default=_uuid)
    train_number = Column(String(10), unique=True, nullable=False, index=True)
    train_name = Column(String(255), nullable=False)
    source_station = Column(String(255), nullable=False, index=True)
    destination_station = Column(String(255), nullable=False, index=True)
    departure_time = Column(String(10), nullable=False)
    arrival_time = Column(String(10), nullable=False)
    duration = Column(String(20), nullable=False)
    base_fare = Column(Numeric(10, 2), nullable=False)
    available_classes = Column(JSON, nullable=False, default=lambda: {"sleeper": True})
    runs_on = Column(JSON, nullable=False, default=list)
    total_seats = Column(Integer, default=72)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    bookings = relationship("Booking", back_populates="train")
    statuses = relationship("TrainStatus", back_populates="train")

class TrainStatus(Base):
    __tablename__ = "train_status"

    id = Column(String(36), primary_key=True, default=_uuid)
    train_id = Column(String(36), ForeignKey("trains.id"), nullable=False, index=True)
    current_station = Column(String(255))
    expected_arrival = Column(String(10))
    actual_arrival = Column(String(10))
    delay_minutes = Column(Integer)
    status = Column(String(50), nullable=False, default="On Time")
    last_updated = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    train = relationship("Train", back_populates="statuses")

# ================================
# Bookings
# ================================
class Booking(Base):
    __tablename__ = "bookings"
    __table_args__ = (
        UniqueConstraint("user_id", "request_id", name="uq_bookings_user_request"),
    )

    id = Column(String(36), primary_key=True, default=_uuid)
    pnr = Column(String(10), unique=True, nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    train_id = Column(String(36), ForeignKey("trains.id"), nullable=False)
    passenger_name = Column(String(255), nullable=False)
    passenger_age = Column(Integer, nullable=False)
    passenger_gender = Column(String(10), nullable=False)
    travel_date = Column(Date, nullable=False)
    travel_class = Column("class", String(20), nullable=False)
    seat_number = Column(String(20))
    fare_paid = Column(Numeric(10, 2), nullable=False)
    booking_status = Column(String(50), nullable=False, default="Confirmed")
    request_id = Column(String(64))
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)

    # Relationships
    train = relationship("Train", back_populates="bookings")
