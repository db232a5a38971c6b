"""Pydantic schemas for stored records and request/response bodies."""
from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field, PositiveFloat, PositiveInt, model_validator

from .models import (
    BookingStatusEnum,
    PaymentMethodEnum,
    PaymentStatusEnum,
    RoleEnum,
    RoomStatusEnum,
    RoomTypeEnum,
)


class UserBase(BaseModel):
    full_name: str = Field(..., max_length=100)
    email: EmailStr
    phone: str = Field("", max_length=30)
    role: RoleEnum = RoleEnum.CUSTOMER


class UserCreate(UserBase):
    password: str = Field(..., min_length=6)


class RegisterRequest(BaseModel):
    full_name: str = Field(..., max_length=100)
    email: EmailStr
    phone: str = Field("", max_length=30)
    password: str = Field(..., min_length=6)


class UserUpdate(BaseModel):
    full_name: Optional[str] = Field(None, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=30)
    role: Optional[RoleEnum] = None
    # empty string means "keep the current password"
    password: Optional[str] = None


class UserRead(UserBase):
    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class UserRecord(UserRead):
    """Stored form of a user. Never leaves the service layer."""

    hashed_password: Optional[str] = None

    def public(self) -> UserRead:
        return UserRead.model_validate(self.model_dump(exclude={"hashed_password"}))


class RoomBase(BaseModel):
    number: str = Field(..., min_length=1, max_length=20)
    type: RoomTypeEnum = RoomTypeEnum.STANDARD
    capacity: PositiveInt = 2
    price_per_night: PositiveFloat = 99
    description: str = ""
    amenities: List[str] = Field(default_factory=list)
    image_url: Optional[str] = None
    status: RoomStatusEnum = RoomStatusEnum.AVAILABLE


class RoomCreate(RoomBase):
    pass


class RoomUpdate(BaseModel):
    number: Optional[str] = Field(None, min_length=1, max_length=20)
    type: Optional[RoomTypeEnum] = None
    capacity: Optional[PositiveInt] = None
    price_per_night: Optional[PositiveFloat] = None
    description: Optional[str] = None
    amenities: Optional[List[str]] = None
    image_url: Optional[str] = None
    status: Optional[RoomStatusEnum] = None


class RoomRead(RoomBase):
    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class RoomSearchParams(BaseModel):
    check_in: Optional[date] = None
    check_out: Optional[date] = None
    guests: PositiveInt = 1
    room_type: Optional[RoomTypeEnum] = None


class AvailabilityCounts(BaseModel):
    total: int
    available: int
    occupied: int
    maintenance: int


class StayQuote(BaseModel):
    nights: int
    nightly_rate: float
    total_amount: float


class BookingFormData(BaseModel):
    guest_name: str = Field(..., min_length=1, max_length=100)
    check_in_date: date
    check_out_date: date
    guest_count: PositiveInt = 1
    special_requests: str = ""
    payment_method: PaymentMethodEnum = PaymentMethodEnum.CASH
    gcash_number: Optional[str] = Field(None, max_length=30)

    @model_validator(mode="after")
    def _gcash_needs_number(self) -> "BookingFormData":
        if self.payment_method == PaymentMethodEnum.GCASH and not self.gcash_number:
            raise ValueError("A GCash number is required for GCash payments")
        return self


class BookingUpdate(BaseModel):
    guest_name: Optional[str] = Field(None, min_length=1, max_length=100)
    guest_count: Optional[PositiveInt] = None
    special_requests: Optional[str] = None


class BookingStatusUpdate(BaseModel):
    status: BookingStatusEnum


class PaymentStatusUpdate(BaseModel):
    payment_status: PaymentStatusEnum


class BookingRead(BaseModel):
    id: int
    user_id: int
    room_id: int
    guest_name: str
    check_in_date: date
    check_out_date: date
    guest_count: int
    room_type: RoomTypeEnum
    total_amount: float
    payment_status: PaymentStatusEnum = PaymentStatusEnum.PENDING
    status: BookingStatusEnum = BookingStatusEnum.PENDING
    payment_method: PaymentMethodEnum = PaymentMethodEnum.CASH
    gcash_number: Optional[str] = None
    special_requests: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class CustomerBookings(BaseModel):
    upcoming: List[BookingRead]
    past: List[BookingRead]
    all: List[BookingRead]


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class SessionRead(Token):
    user: UserRead
    home: str


class AdminDashboard(BaseModel):
    total_users: int
    total_rooms: int
    total_bookings: int
    revenue: float
    occupancy_rate: float
    recent_bookings: List[BookingRead]


class StaffDashboard(BaseModel):
    total_bookings: int
    pending_bookings: int
    confirmed_bookings: int
    pending_payments: int
    paid_bookings: int
    total_rooms: int
    available_rooms: int
    occupied_rooms: int
    recent_bookings: List[BookingRead]


class HomePage(BaseModel):
    available_rooms: int
    featured_rooms: List[RoomRead]


class CustomerDashboard(BaseModel):
    user: UserRead
    upcoming_bookings: List[BookingRead]
    total_bookings: int
    available_rooms: int


class RoomSelection(BaseModel):
    room: RoomRead
    guests: Optional[int] = None
    quote: Optional[StayQuote] = None


class ReservationQuote(BaseModel):
    room: RoomRead
    check_in_date: date
    check_out_date: date
    guests: int
    quote: StayQuote
