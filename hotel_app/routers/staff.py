from typing import List, Literal, Optional

from fastapi import APIRouter, Depends

from hotel_common.dependencies import get_hotel_services, require_area
from hotel_common.models import BookingStatusEnum, PaymentStatusEnum, RoomStatusEnum, RoomTypeEnum
from hotel_common.reports import staff_dashboard
from hotel_common.schemas import (
    BookingRead,
    BookingStatusUpdate,
    BookingUpdate,
    PaymentStatusUpdate,
    RoomRead,
    StaffDashboard,
)
from hotel_common.services import HotelServices

router = APIRouter(prefix="/staff", tags=["staff"], dependencies=[Depends(require_area("staff"))])

DateRange = Literal["today", "tomorrow", "week", "month"]


@router.get("", response_model=StaffDashboard)
def dashboard(services: HotelServices = Depends(get_hotel_services)) -> StaffDashboard:
    return staff_dashboard(services.rooms.list_rooms(), services.bookings.list_bookings())


@router.get("/reservations", response_model=List[BookingRead])
def view_reservations(
    status: Optional[BookingStatusEnum] = None,
    date_range: Optional[DateRange] = None,
    search: Optional[str] = None,
    services: HotelServices = Depends(get_hotel_services),
) -> List[BookingRead]:
    return services.bookings.list_bookings(status=status, date_range=date_range, search_term=search)


@router.get("/manage-bookings", response_model=List[BookingRead])
def list_manageable_bookings(
    status: Optional[BookingStatusEnum] = None,
    search: Optional[str] = None,
    services: HotelServices = Depends(get_hotel_services),
) -> List[BookingRead]:
    return services.bookings.list_bookings(status=status, search_term=search)


@router.patch("/manage-bookings/{booking_id}", response_model=BookingRead)
def update_booking_status(
    booking_id: int,
    status_update: BookingStatusUpdate,
    services: HotelServices = Depends(get_hotel_services),
) -> BookingRead:
    return services.bookings.change_status(booking_id, status_update.status)


@router.put("/manage-bookings/{booking_id}/details", response_model=BookingRead)
def update_booking_details(
    booking_id: int,
    booking_update: BookingUpdate,
    services: HotelServices = Depends(get_hotel_services),
) -> BookingRead:
    return services.bookings.update_booking(booking_id, booking_update)


@router.post("/manage-bookings/{booking_id}/cancel", response_model=BookingRead)
def cancel_booking(booking_id: int, services: HotelServices = Depends(get_hotel_services)) -> BookingRead:
    return services.bookings.cancel_booking(booking_id)


@router.get("/manage-payments", response_model=List[BookingRead])
def list_payments(
    payment_status: Optional[PaymentStatusEnum] = None,
    search: Optional[str] = None,
    services: HotelServices = Depends(get_hotel_services),
) -> List[BookingRead]:
    return services.bookings.list_bookings(payment_status=payment_status, search_term=search)


@router.patch("/manage-payments/{booking_id}", response_model=BookingRead)
def update_payment_status(
    booking_id: int,
    payment_update: PaymentStatusUpdate,
    services: HotelServices = Depends(get_hotel_services),
) -> BookingRead:
    return services.bookings.change_payment_status(booking_id, payment_update.payment_status)


@router.get("/available-rooms", response_model=List[RoomRead])
def view_rooms(
    status: Optional[RoomStatusEnum] = RoomStatusEnum.AVAILABLE,
    all_statuses: bool = False,
    room_type: Optional[RoomTypeEnum] = None,
    search: Optional[str] = None,
    services: HotelServices = Depends(get_hotel_services),
) -> List[RoomRead]:
    return services.rooms.search_rooms(
        room_type=room_type,
        status=None if all_statuses else status,
        search_term=search,
    )
