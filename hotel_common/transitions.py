"""Booking status and payment status lifecycles."""
from __future__ import annotations

from typing import Dict, FrozenSet

from .errors import InvalidTransitionError
from .models import BookingStatusEnum, PaymentStatusEnum
from .schemas import BookingRead

BOOKING_TRANSITIONS: Dict[BookingStatusEnum, FrozenSet[BookingStatusEnum]] = {
    BookingStatusEnum.PENDING: frozenset({BookingStatusEnum.CONFIRMED, BookingStatusEnum.CANCELLED}),
    BookingStatusEnum.CONFIRMED: frozenset({BookingStatusEnum.COMPLETED, BookingStatusEnum.CANCELLED}),
    BookingStatusEnum.CANCELLED: frozenset({BookingStatusEnum.CANCELLED}),
    BookingStatusEnum.COMPLETED: frozenset(),
}

PAYMENT_TRANSITIONS: Dict[PaymentStatusEnum, FrozenSet[PaymentStatusEnum]] = {
    PaymentStatusEnum.PENDING: frozenset({PaymentStatusEnum.PAID}),
    PaymentStatusEnum.PAID: frozenset({PaymentStatusEnum.REFUNDED}),
    PaymentStatusEnum.REFUNDED: frozenset(),
}


def can_transition(current: BookingStatusEnum, target: BookingStatusEnum) -> bool:
    return target in BOOKING_TRANSITIONS[current]


def can_cancel(booking: BookingRead) -> bool:
    return can_transition(booking.status, BookingStatusEnum.CANCELLED)


def transition_booking_status(booking: BookingRead, target: BookingStatusEnum) -> Dict[str, BookingStatusEnum]:
    """Validate a booking status move and return the field changes to apply."""

    if not can_transition(booking.status, target):
        raise InvalidTransitionError(
            f"Cannot change booking status from {booking.status.value} to {target.value}"
        )
    return {"status": target}


def transition_payment_status(booking: BookingRead, target: PaymentStatusEnum) -> Dict[str, PaymentStatusEnum]:
    """Validate a payment status move and return the field changes to apply.

    Refunds are only possible for paid bookings that have not been cancelled.
    """

    if target not in PAYMENT_TRANSITIONS[booking.payment_status]:
        raise InvalidTransitionError(
            f"Cannot change payment status from {booking.payment_status.value} to {target.value}"
        )
    if target == PaymentStatusEnum.REFUNDED and booking.status == BookingStatusEnum.CANCELLED:
        raise InvalidTransitionError("Cannot refund a cancelled booking")
    return {"payment_status": target}
