"""In-memory room filtering used by the public, customer and staff room views."""
from __future__ import annotations

from typing import Iterable, List, Optional

from .models import RoomStatusEnum, RoomTypeEnum
from .schemas import AvailabilityCounts, RoomRead


def filter_rooms(
    rooms: Iterable[RoomRead],
    room_type: Optional[RoomTypeEnum] = None,
    min_capacity: int = 0,
    status: Optional[RoomStatusEnum] = RoomStatusEnum.AVAILABLE,
    search_term: Optional[str] = None,
) -> List[RoomRead]:
    """Return the rooms matching every given predicate, keeping their order.

    Booked date ranges are not consulted: a room with status ``available`` is
    offered for any requested stay.
    """

    term = search_term.strip().lower() if search_term else ""
    matched = []
    for room in rooms:
        if room_type is not None and room.type != room_type:
            continue
        if room.capacity < min_capacity:
            continue
        if status is not None and room.status != status:
            continue
        if term and not _matches_term(room, term):
            continue
        matched.append(room)
    return matched


def _matches_term(room: RoomRead, term: str) -> bool:
    return term in room.number.lower() or term in room.type.value or term in room.description.lower()


def count_by_status(rooms: Iterable[RoomRead]) -> AvailabilityCounts:
    counts = {state: 0 for state in RoomStatusEnum}
    total = 0
    for room in rooms:
        counts[room.status] += 1
        total += 1
    return AvailabilityCounts(
        total=total,
        available=counts[RoomStatusEnum.AVAILABLE],
        occupied=counts[RoomStatusEnum.OCCUPIED],
        maintenance=counts[RoomStatusEnum.MAINTENANCE],
    )
