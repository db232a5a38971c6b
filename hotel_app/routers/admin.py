from typing import List

from fastapi import APIRouter, Depends, status

from hotel_common.dependencies import get_hotel_services, require_area
from hotel_common.reports import admin_dashboard
from hotel_common.schemas import (
    AdminDashboard,
    BookingRead,
    RoomCreate,
    RoomRead,
    RoomUpdate,
    UserCreate,
    UserRead,
    UserUpdate,
)
from hotel_common.services import HotelServices

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_area("admin"))])


@router.get("", response_model=AdminDashboard)
def dashboard(services: HotelServices = Depends(get_hotel_services)) -> AdminDashboard:
    return admin_dashboard(
        services.users.list_users(),
        services.rooms.list_rooms(),
        services.bookings.list_bookings(),
    )


@router.get("/users", response_model=List[UserRead])
def list_users(services: HotelServices = Depends(get_hotel_services)) -> List[UserRead]:
    return services.users.list_users()


@router.post("/users", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(user_in: UserCreate, services: HotelServices = Depends(get_hotel_services)) -> UserRead:
    return services.users.create_user(user_in)


@router.get("/users/{user_id}", response_model=UserRead)
def get_user(user_id: int, services: HotelServices = Depends(get_hotel_services)) -> UserRead:
    return services.users.get_user(user_id)


@router.put("/users/{user_id}", response_model=UserRead)
def update_user(
    user_id: int,
    user_update: UserUpdate,
    services: HotelServices = Depends(get_hotel_services),
) -> UserRead:
    return services.users.update_user(user_id, user_update)


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, services: HotelServices = Depends(get_hotel_services)) -> None:
    services.users.delete_user(user_id)


@router.get("/rooms", response_model=List[RoomRead])
def list_rooms(services: HotelServices = Depends(get_hotel_services)) -> List[RoomRead]:
    return services.rooms.list_rooms()


@router.post("/rooms", response_model=RoomRead, status_code=status.HTTP_201_CREATED)
def add_room(room_in: RoomCreate, services: HotelServices = Depends(get_hotel_services)) -> RoomRead:
    return services.rooms.create_room(room_in)


@router.get("/rooms/{room_id}", response_model=RoomRead)
def get_room(room_id: int, services: HotelServices = Depends(get_hotel_services)) -> RoomRead:
    return services.rooms.get_room(room_id)


@router.put("/rooms/{room_id}", response_model=RoomRead)
def update_room(
    room_id: int,
    room_update: RoomUpdate,
    services: HotelServices = Depends(get_hotel_services),
) -> RoomRead:
    return services.rooms.update_room(room_id, room_update)


@router.delete("/rooms/{room_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_room(room_id: int, services: HotelServices = Depends(get_hotel_services)) -> None:
    services.rooms.delete_room(room_id)


@router.get("/bookings", response_model=List[BookingRead])
def list_bookings(services: HotelServices = Depends(get_hotel_services)) -> List[BookingRead]:
    return services.bookings.list_bookings()


@router.delete("/bookings/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_booking(booking_id: int, services: HotelServices = Depends(get_hotel_services)) -> None:
    services.bookings.delete_booking(booking_id)
