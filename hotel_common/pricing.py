"""Night count and stay price calculation."""
from __future__ import annotations

import math
from datetime import date, datetime
from typing import Union

from .errors import ValidationFailedError
from .schemas import StayQuote

DateLike = Union[date, datetime]

_SECONDS_PER_DAY = 24 * 60 * 60


def count_nights(check_in: DateLike, check_out: DateLike) -> int:
    """Return the number of nights between two dates, rounding partial days up.

    Raises ``ValidationFailedError`` unless ``check_out`` is strictly after ``check_in``.
    """

    if isinstance(check_in, datetime) != isinstance(check_out, datetime):
        # compare calendar days when only one side carries a time
        check_in = check_in.date() if isinstance(check_in, datetime) else check_in
        check_out = check_out.date() if isinstance(check_out, datetime) else check_out
    if check_out <= check_in:
        raise ValidationFailedError("Check-out date must be after check-in date")
    delta = check_out - check_in
    return math.ceil(delta.total_seconds() / _SECONDS_PER_DAY)


def calculate_total(check_in: DateLike, check_out: DateLike, nightly_rate: float) -> StayQuote:
    nights = count_nights(check_in, check_out)
    return StayQuote(nights=nights, nightly_rate=nightly_rate, total_amount=nights * nightly_rate)
