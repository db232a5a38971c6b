from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, status

from hotel_common.dependencies import get_hotel_services, require_area
from hotel_common.errors import NotFoundError
from hotel_common.pricing import calculate_total, count_nights
from hotel_common.schemas import (
    BookingFormData,
    BookingRead,
    CustomerBookings,
    CustomerDashboard,
    ReservationQuote,
    RoomRead,
    RoomSearchParams,
    RoomSelection,
    UserRead,
)
from hotel_common.services import HotelServices

customer_only = require_area("customer")
router = APIRouter(prefix="/customer", tags=["customer"], dependencies=[Depends(customer_only)])


def _own_booking(services: HotelServices, booking_id: int, actor: UserRead) -> BookingRead:
    booking = services.bookings.get_booking(booking_id)
    if booking.user_id != actor.id:
        raise NotFoundError("Booking not found")
    return booking


@router.get("", response_model=CustomerDashboard)
def dashboard(
    actor: UserRead = Depends(customer_only),
    services: HotelServices = Depends(get_hotel_services),
) -> CustomerDashboard:
    bookings = services.bookings.list_customer_bookings(actor.id)
    return CustomerDashboard(
        user=actor,
        upcoming_bookings=bookings.upcoming,
        total_bookings=len(bookings.all),
        available_rooms=services.rooms.availability_counts().available,
    )


@router.get("/search", response_model=List[RoomRead])
def search_rooms(
    params: RoomSearchParams = Depends(),
    services: HotelServices = Depends(get_hotel_services),
) -> List[RoomRead]:
    if params.check_in and params.check_out:
        count_nights(params.check_in, params.check_out)
    return services.rooms.search_rooms(room_type=params.room_type, guests=params.guests)


@router.get("/select/{room_id}", response_model=RoomSelection)
def select_room(
    room_id: int,
    check_in: Optional[date] = None,
    check_out: Optional[date] = None,
    guests: Optional[int] = None,
    services: HotelServices = Depends(get_hotel_services),
) -> RoomSelection:
    room = services.rooms.get_room(room_id)
    quote = None
    if check_in and check_out:
        quote = calculate_total(check_in, check_out, room.price_per_night)
    return RoomSelection(room=room, guests=guests, quote=quote)


@router.get("/reserve/{room_id}", response_model=ReservationQuote)
def reservation_quote(
    room_id: int,
    check_in: Optional[date] = None,
    check_out: Optional[date] = None,
    guests: Optional[int] = None,
    services: HotelServices = Depends(get_hotel_services),
) -> ReservationQuote:
    quote = services.bookings.quote(room_id, check_in, check_out, guests)
    return ReservationQuote(
        room=services.rooms.get_room(room_id),
        check_in_date=check_in,
        check_out_date=check_out,
        guests=guests,
        quote=quote,
    )


@router.post("/reserve/{room_id}", response_model=BookingRead, status_code=status.HTTP_201_CREATED)
def make_reservation(
    room_id: int,
    form: BookingFormData,
    actor: UserRead = Depends(customer_only),
    services: HotelServices = Depends(get_hotel_services),
) -> BookingRead:
    return services.bookings.create_booking(actor.id, room_id, form)


@router.get("/bookings", response_model=CustomerBookings)
def my_bookings(
    actor: UserRead = Depends(customer_only),
    services: HotelServices = Depends(get_hotel_services),
) -> CustomerBookings:
    return services.bookings.list_customer_bookings(actor.id)


@router.get("/bookings/{booking_id}", response_model=BookingRead)
def my_booking(
    booking_id: int,
    actor: UserRead = Depends(customer_only),
    services: HotelServices = Depends(get_hotel_services),
) -> BookingRead:
    return _own_booking(services, booking_id, actor)


@router.post("/bookings/{booking_id}/cancel", response_model=BookingRead)
def cancel_my_booking(
    booking_id: int,
    actor: UserRead = Depends(customer_only),
    services: HotelServices = Depends(get_hotel_services),
) -> BookingRead:
    _own_booking(services, booking_id, actor)
    return services.bookings.cancel_booking(booking_id)
