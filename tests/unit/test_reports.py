"""Unit tests for the dashboard statistics."""
from datetime import date, datetime

from hotel_common.models import BookingStatusEnum, PaymentStatusEnum, RoleEnum, RoomStatusEnum, RoomTypeEnum
from hotel_common.reports import admin_dashboard, recent_bookings, staff_dashboard
from hotel_common.schemas import BookingRead, RoomRead, UserRead

TODAY = date(2025, 6, 15)


def make_booking(booking_id, status=BookingStatusEnum.PENDING, payment_status=PaymentStatusEnum.PENDING,
                 check_in=date(2025, 6, 14), check_out=date(2025, 6, 17), total=3000):
    return BookingRead(
        id=booking_id,
        user_id=3,
        room_id=1,
        guest_name=f"Guest {booking_id}",
        check_in_date=check_in,
        check_out_date=check_out,
        guest_count=1,
        room_type=RoomTypeEnum.STANDARD,
        total_amount=total,
        status=status,
        payment_status=payment_status,
        created_at=datetime(2025, 6, 1, hour=booking_id),
    )


ROOMS = [
    RoomRead(id=i, number=str(i), status=status, created_at=datetime(2025, 1, 1))
    for i, status in enumerate(
        [RoomStatusEnum.AVAILABLE, RoomStatusEnum.AVAILABLE, RoomStatusEnum.OCCUPIED, RoomStatusEnum.MAINTENANCE], start=1
    )
]

USERS = [
    UserRead(id=1, full_name="Admin", email="admin@example.com", role=RoleEnum.ADMIN, created_at=datetime(2025, 1, 1)),
    UserRead(id=3, full_name="Guest", email="guest@example.com", created_at=datetime(2025, 1, 1)),
]


def test_recent_bookings_newest_first_and_limited():
    bookings = [make_booking(i) for i in range(1, 8)]

    assert [b.id for b in recent_bookings(bookings)] == [7, 6, 5, 4, 3]


def test_admin_dashboard():
    bookings = [
        make_booking(1, status=BookingStatusEnum.CONFIRMED, total=3000),
        make_booking(2, status=BookingStatusEnum.CONFIRMED, check_in=date(2025, 7, 1), check_out=date(2025, 7, 3), total=1500),
        make_booking(3, status=BookingStatusEnum.CANCELLED, total=9999),
        make_booking(4, status=BookingStatusEnum.PENDING, total=800),
    ]

    stats = admin_dashboard(USERS, ROOMS, bookings, today=TODAY)

    assert stats.total_users == 2
    assert stats.total_rooms == 4
    assert stats.total_bookings == 4
    assert stats.revenue == 4500
    assert stats.occupancy_rate == 25
    assert [b.id for b in stats.recent_bookings] == [4, 3, 2, 1]


def test_admin_dashboard_without_rooms():
    stats = admin_dashboard([], [], [], today=TODAY)

    assert stats.occupancy_rate == 0
    assert stats.revenue == 0


def test_staff_dashboard():
    bookings = [
        make_booking(1, status=BookingStatusEnum.CONFIRMED, payment_status=PaymentStatusEnum.PAID),
        make_booking(2),
        make_booking(3, payment_status=PaymentStatusEnum.REFUNDED),
    ]

    stats = staff_dashboard(ROOMS, bookings)

    assert (stats.total_bookings, stats.pending_bookings, stats.confirmed_bookings) == (3, 2, 1)
    assert (stats.pending_payments, stats.paid_bookings) == (1, 1)
    assert (stats.total_rooms, stats.available_rooms, stats.occupied_rooms) == (4, 2, 1)
