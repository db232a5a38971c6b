"""Business operations over the repositories.

Services validate input, enforce the domain rules and raise the errors from
:mod:`hotel_common.errors`. They only ever hand out copies of stored records,
and never a password hash.
"""
from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from functools import lru_cache
from typing import Iterable, List, Optional

from . import auth
from .availability import count_by_status, filter_rooms
from .cache import RoomSearchCache
from .config import Settings, get_settings
from .errors import ConflictError, IncompleteNavigationError, NotFoundError, ValidationFailedError
from .models import (
    BookingStatusEnum,
    PaymentMethodEnum,
    PaymentStatusEnum,
    RoleEnum,
    RoomStatusEnum,
    RoomTypeEnum,
)
from .pricing import calculate_total
from .schemas import (
    AvailabilityCounts,
    BookingFormData,
    BookingRead,
    BookingUpdate,
    CustomerBookings,
    RegisterRequest,
    RoomCreate,
    RoomRead,
    RoomUpdate,
    StayQuote,
    UserCreate,
    UserRead,
    UserUpdate,
)
from .store import DataStore, build_store
from .transitions import transition_booking_status, transition_payment_status

logger = logging.getLogger(__name__)

SEARCH_PATH = "/customer/search"
DATE_RANGES = ("today", "tomorrow", "week", "month")


def _present(changes: dict, nullable: Iterable[str] = ()) -> dict:
    """Drop explicit nulls sent for fields that cannot be cleared."""

    return {key: value for key, value in changes.items() if value is not None or key in nullable}


class UserService:
    def __init__(self, store: DataStore) -> None:
        self._users = store.users

    def list_users(self) -> List[UserRead]:
        return [user.public() for user in self._users.list()]

    def get_user(self, user_id: int) -> UserRead:
        user = self._users.get(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user.public()

    def create_user(self, user_in: UserCreate) -> UserRead:
        if self._users.get_by_email(user_in.email):
            raise ConflictError("Email already in use")
        data = user_in.model_dump(exclude={"password"})
        data["hashed_password"] = auth.get_password_hash(user_in.password)
        user = self._users.add(data)
        logger.info("Created %s account %s (id=%s)", user.role.value, user.email, user.id)
        return user.public()

    def register_customer(self, registration: RegisterRequest) -> UserRead:
        return self.create_user(UserCreate(**registration.model_dump(), role=RoleEnum.CUSTOMER))

    def update_user(self, user_id: int, user_update: UserUpdate) -> UserRead:
        if not self._users.get(user_id):
            raise NotFoundError("User not found")
        changes = _present(user_update.model_dump(exclude_unset=True, exclude={"password"}))
        if "email" in changes:
            owner = self._users.get_by_email(changes["email"])
            if owner and owner.id != user_id:
                raise ConflictError("Email already in use")
        if user_update.password:
            changes["hashed_password"] = auth.get_password_hash(user_update.password)
        user = self._users.update(user_id, changes)
        if user is None:
            raise NotFoundError("User not found")
        return user.public()

    def delete_user(self, user_id: int) -> None:
        if not self._users.delete(user_id):
            raise NotFoundError("User not found")
        logger.info("Deleted user id=%s", user_id)

    def authenticate(self, email: str, password: str) -> Optional[UserRead]:
        user = auth.authenticate_user(self._users, email, password)
        return user.public() if user else None


class RoomService:
    def __init__(self, store: DataStore, cache: RoomSearchCache) -> None:
        self._rooms = store.rooms
        self._cache = cache

    def list_rooms(self) -> List[RoomRead]:
        return self._rooms.list()

    def get_room(self, room_id: int) -> RoomRead:
        room = self._rooms.get(room_id)
        if not room:
            raise NotFoundError("Room not found")
        return room

    def search_rooms(
        self,
        room_type: Optional[RoomTypeEnum] = None,
        guests: int = 0,
        status: Optional[RoomStatusEnum] = RoomStatusEnum.AVAILABLE,
        search_term: Optional[str] = None,
    ) -> List[RoomRead]:
        key = (room_type, guests, status, (search_term or "").strip().lower())
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        rooms = filter_rooms(
            self._rooms.list(),
            room_type=room_type,
            min_capacity=guests,
            status=status,
            search_term=search_term,
        )
        self._cache.set(key, rooms)
        return rooms

    def availability_counts(self) -> AvailabilityCounts:
        return count_by_status(self._rooms.list())

    def create_room(self, room_in: RoomCreate) -> RoomRead:
        room = self._rooms.add(room_in.model_dump())
        self._cache.clear()
        logger.info("Created room %s (id=%s, %s)", room.number, room.id, room.type.value)
        return room

    def update_room(self, room_id: int, room_update: RoomUpdate) -> RoomRead:
        changes = _present(room_update.model_dump(exclude_unset=True), nullable={"image_url"})
        room = self._rooms.update(room_id, changes)
        if room is None:
            raise NotFoundError("Room not found")
        self._cache.clear()
        logger.info("Updated room id=%s fields=%s", room_id, sorted(changes))
        return room

    def delete_room(self, room_id: int) -> None:
        if not self._rooms.delete(room_id):
            raise NotFoundError("Room not found")
        self._cache.clear()
        logger.info("Deleted room id=%s", room_id)


def _add_month(day: date) -> date:
    year, month = (day.year + 1, 1) if day.month == 12 else (day.year, day.month + 1)
    return day.replace(year=year, month=month, day=min(day.day, calendar.monthrange(year, month)[1]))


def _in_date_range(booking: BookingRead, date_range: str, today: date) -> bool:
    check_in = booking.check_in_date
    if date_range == "today":
        return check_in == today
    if date_range == "tomorrow":
        return check_in == today + timedelta(days=1)
    if date_range == "week":
        return today <= check_in <= today + timedelta(days=7)
    if date_range == "month":
        return today <= check_in <= _add_month(today)
    raise ValidationFailedError(f"Unknown date range '{date_range}'")


class BookingService:
    def __init__(self, store: DataStore, rooms: RoomService) -> None:
        self._bookings = store.bookings
        self._room_records = store.rooms
        self._rooms = rooms

    def list_bookings(
        self,
        status: Optional[BookingStatusEnum] = None,
        payment_status: Optional[PaymentStatusEnum] = None,
        date_range: Optional[str] = None,
        search_term: Optional[str] = None,
        today: Optional[date] = None,
    ) -> List[BookingRead]:
        today = today or date.today()
        term = (search_term or "").strip().lower()
        result = []
        for booking in self._bookings.list():
            if status and booking.status != status:
                continue
            if payment_status and booking.payment_status != payment_status:
                continue
            if date_range and not _in_date_range(booking, date_range, today):
                continue
            if term and term not in booking.guest_name.lower() and term not in str(booking.id):
                continue
            result.append(booking)
        return result

    def get_booking(self, booking_id: int) -> BookingRead:
        booking = self._bookings.get(booking_id)
        if not booking:
            raise NotFoundError("Booking not found")
        return booking

    def list_customer_bookings(self, user_id: int, today: Optional[date] = None) -> CustomerBookings:
        today = today or date.today()
        bookings = self._bookings.list_for_user(user_id)
        upcoming = [
            b for b in bookings
            if b.status in (BookingStatusEnum.PENDING, BookingStatusEnum.CONFIRMED) and b.check_in_date > today
        ]
        past = [b for b in bookings if b.check_out_date < today or b.status == BookingStatusEnum.CANCELLED]
        return CustomerBookings(upcoming=upcoming, past=past, all=bookings)

    def quote(
        self,
        room_id: int,
        check_in: Optional[date],
        check_out: Optional[date],
        guests: Optional[int],
    ) -> StayQuote:
        if check_in is None or check_out is None or guests is None:
            raise IncompleteNavigationError(
                "Select your stay dates and guest count before reserving a room", redirect=SEARCH_PATH
            )
        room = self._rooms.get_room(room_id)
        return calculate_total(check_in, check_out, room.price_per_night)

    def create_booking(self, user_id: Optional[int], room_id: Optional[int], form: BookingFormData) -> BookingRead:
        if user_id is None or room_id is None:
            raise IncompleteNavigationError("Missing user or room information", redirect=SEARCH_PATH)
        room = self._rooms.get_room(room_id)
        if form.guest_count > room.capacity:
            raise ValidationFailedError(f"Room {room.number} holds at most {room.capacity} guests")
        # room overlap is not checked here; an available room can be booked twice for the same dates
        stay = calculate_total(form.check_in_date, form.check_out_date, room.price_per_night)
        booking = self._bookings.add(
            {
                "user_id": user_id,
                "room_id": room.id,
                "guest_name": form.guest_name,
                "check_in_date": form.check_in_date,
                "check_out_date": form.check_out_date,
                "guest_count": form.guest_count,
                "room_type": room.type,
                "total_amount": stay.total_amount,
                "payment_status": PaymentStatusEnum.PENDING,
                "status": BookingStatusEnum.PENDING,
                "payment_method": form.payment_method,
                "gcash_number": form.gcash_number if form.payment_method == PaymentMethodEnum.GCASH else None,
                "special_requests": form.special_requests,
            }
        )
        logger.info(
            "Booking %s created: user=%s room=%s nights=%s total=%.2f",
            booking.id,
            user_id,
            room.id,
            stay.nights,
            stay.total_amount,
        )
        return booking

    def _apply(self, booking_id: int, changes: dict) -> BookingRead:
        booking = self._bookings.update(booking_id, changes)
        if booking is None:
            raise NotFoundError("Booking not found")
        return booking

    def update_booking(self, booking_id: int, booking_update: BookingUpdate) -> BookingRead:
        booking = self.get_booking(booking_id)
        changes = _present(booking_update.model_dump(exclude_unset=True), nullable={"special_requests"})
        if "guest_count" in changes:
            # a deleted room leaves nothing to check against
            room = self._room_records.get(booking.room_id)
            if room and changes["guest_count"] > room.capacity:
                raise ValidationFailedError(f"Room {room.number} holds at most {room.capacity} guests")
        return self._apply(booking_id, changes)

    def change_status(self, booking_id: int, target: BookingStatusEnum) -> BookingRead:
        booking = self.get_booking(booking_id)
        updated = self._apply(booking_id, transition_booking_status(booking, target))
        logger.info("Booking %s status %s -> %s", booking_id, booking.status.value, target.value)
        return updated

    def change_payment_status(self, booking_id: int, target: PaymentStatusEnum) -> BookingRead:
        booking = self.get_booking(booking_id)
        updated = self._apply(booking_id, transition_payment_status(booking, target))
        logger.info("Booking %s payment %s -> %s", booking_id, booking.payment_status.value, target.value)
        return updated

    def cancel_booking(self, booking_id: int) -> BookingRead:
        return self.change_status(booking_id, BookingStatusEnum.CANCELLED)

    def delete_booking(self, booking_id: int) -> None:
        if not self._bookings.delete(booking_id):
            raise NotFoundError("Booking not found")
        logger.info("Deleted booking id=%s", booking_id)


@dataclass
class HotelServices:
    store: DataStore
    users: UserService
    rooms: RoomService
    bookings: BookingService


def build_services(store: DataStore, settings: Settings) -> HotelServices:
    rooms = RoomService(store, RoomSearchCache(ttl=settings.room_cache_ttl))
    return HotelServices(
        store=store,
        users=UserService(store),
        rooms=rooms,
        bookings=BookingService(store, rooms),
    )


@lru_cache
def get_services() -> HotelServices:
    """Return the process-wide services bound to the configured store."""

    settings = get_settings()
    return build_services(build_store(settings), settings)


def reset_services_cache() -> None:
    """Drop the cached services and their store (useful for tests)."""

    get_services.cache_clear()
