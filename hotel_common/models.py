"""Domain enums and the SQLAlchemy tables backing the SQL repositories."""
from __future__ import annotations

from datetime import date, datetime, timezone
from enum import Enum
from typing import List, Optional

from sqlalchemy import Date, DateTime, Enum as SqlEnum, Float, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RoleEnum(str, Enum):
    ADMIN = "admin"
    STAFF = "staff"
    CUSTOMER = "customer"


class RoomTypeEnum(str, Enum):
    STANDARD = "standard"
    DELUXE = "deluxe"
    SUITE = "suite"
    FAMILY = "family"


class RoomStatusEnum(str, Enum):
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"


class BookingStatusEnum(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class PaymentStatusEnum(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    REFUNDED = "refunded"


class PaymentMethodEnum(str, Enum):
    CASH = "cash"
    GCASH = "gcash"


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    full_name: Mapped[str] = mapped_column(String(100))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    hashed_password: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    phone: Mapped[str] = mapped_column(String(30), default="")
    role: Mapped[RoleEnum] = mapped_column(SqlEnum(RoleEnum), default=RoleEnum.CUSTOMER)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[Optional[datetime]] = mapped_column(DateTime, default=None)


class Room(Base):
    __tablename__ = "rooms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    number: Mapped[str] = mapped_column(String(20), index=True)
    type: Mapped[RoomTypeEnum] = mapped_column(SqlEnum(RoomTypeEnum), default=RoomTypeEnum.STANDARD, index=True)
    capacity: Mapped[int] = mapped_column(Integer, index=True)
    price_per_night: Mapped[float] = mapped_column(Float)
    description: Mapped[str] = mapped_column(Text, default="")
    amenities: Mapped[List[str]] = mapped_column(JSON, default=list)
    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[RoomStatusEnum] = mapped_column(SqlEnum(RoomStatusEnum), default=RoomStatusEnum.AVAILABLE, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[Optional[datetime]] = mapped_column(DateTime, default=None)


class Booking(Base):
    __tablename__ = "bookings"

    # user_id and room_id are plain columns: deleting a user or room leaves its bookings alone.
    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(Integer, index=True)
    room_id: Mapped[int] = mapped_column(Integer, index=True)
    guest_name: Mapped[str] = mapped_column(String(100))
    check_in_date: Mapped[date] = mapped_column(Date, index=True)
    check_out_date: Mapped[date] = mapped_column(Date, index=True)
    guest_count: Mapped[int] = mapped_column(Integer)
    room_type: Mapped[RoomTypeEnum] = mapped_column(SqlEnum(RoomTypeEnum))
    total_amount: Mapped[float] = mapped_column(Float)
    payment_status: Mapped[PaymentStatusEnum] = mapped_column(SqlEnum(PaymentStatusEnum), default=PaymentStatusEnum.PENDING)
    status: Mapped[BookingStatusEnum] = mapped_column(SqlEnum(BookingStatusEnum), default=BookingStatusEnum.PENDING, index=True)
    payment_method: Mapped[PaymentMethodEnum] = mapped_column(SqlEnum(PaymentMethodEnum), default=PaymentMethodEnum.CASH)
    gcash_number: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    special_requests: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, index=True)
    updated_at: Mapped[Optional[datetime]] = mapped_column(DateTime, default=None)
