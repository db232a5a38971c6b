"""Dashboard statistics for the admin and staff areas."""
from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence

from .availability import count_by_status
from .models import BookingStatusEnum, PaymentStatusEnum
from .schemas import AdminDashboard, BookingRead, RoomRead, StaffDashboard, UserRead

RECENT_LIMIT = 5


def recent_bookings(bookings: Sequence[BookingRead], limit: int = RECENT_LIMIT) -> List[BookingRead]:
    return sorted(bookings, key=lambda booking: booking.created_at, reverse=True)[:limit]


def admin_dashboard(
    users: Sequence[UserRead],
    rooms: Sequence[RoomRead],
    bookings: Sequence[BookingRead],
    today: Optional[date] = None,
) -> AdminDashboard:
    today = today or date.today()
    confirmed = [b for b in bookings if b.status == BookingStatusEnum.CONFIRMED]
    in_house = [b for b in confirmed if b.check_in_date <= today <= b.check_out_date]
    occupancy = (len(in_house) / len(rooms)) * 100 if rooms else 0.0
    return AdminDashboard(
        total_users=len(users),
        total_rooms=len(rooms),
        total_bookings=len(bookings),
        revenue=sum(b.total_amount for b in confirmed),
        occupancy_rate=occupancy,
        recent_bookings=recent_bookings(bookings),
    )


def staff_dashboard(rooms: Sequence[RoomRead], bookings: Sequence[BookingRead]) -> StaffDashboard:
    counts = count_by_status(rooms)
    return StaffDashboard(
        total_bookings=len(bookings),
        pending_bookings=sum(1 for b in bookings if b.status == BookingStatusEnum.PENDING),
        confirmed_bookings=sum(1 for b in bookings if b.status == BookingStatusEnum.CONFIRMED),
        pending_payments=sum(1 for b in bookings if b.payment_status == PaymentStatusEnum.PENDING),
        paid_bookings=sum(1 for b in bookings if b.payment_status == PaymentStatusEnum.PAID),
        total_rooms=counts.total,
        available_rooms=counts.available,
        occupied_rooms=counts.occupied,
        recent_bookings=recent_bookings(bookings),
    )
