from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.security import OAuth2PasswordRequestForm

from hotel_common.access import home_path_for
from hotel_common.auth import token_for
from hotel_common.dependencies import get_current_actor, get_current_user, get_hotel_services
from hotel_common.models import RoomTypeEnum
from hotel_common.rate_limit import limiter, login_limit, register_limit
from hotel_common.schemas import HomePage, RegisterRequest, RoomRead, SessionRead, UserRead
from hotel_common.services import HotelServices

router = APIRouter(tags=["public"])

FEATURED_ROOMS = 3


def _session(user: UserRead) -> SessionRead:
    return SessionRead(access_token=token_for(user), user=user, home=home_path_for(user))


@router.get("/health", tags=["health"])
def health() -> dict[str, str]:
    return {"status": "ok", "service": "hotel"}


@router.get("/", response_model=HomePage)
def home(services: HotelServices = Depends(get_hotel_services)) -> HomePage:
    rooms = services.rooms.search_rooms()
    return HomePage(available_rooms=len(rooms), featured_rooms=rooms[:FEATURED_ROOMS])


@router.post("/login", response_model=SessionRead)
@limiter.limit(login_limit)
def login(
    request: Request,
    form_data: OAuth2PasswordRequestForm = Depends(),
    services: HotelServices = Depends(get_hotel_services),
) -> SessionRead:
    # the OAuth2 form calls it "username"; accounts sign in with their email
    user = services.users.authenticate(form_data.username, form_data.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")
    return _session(user)


@router.post("/register", response_model=SessionRead, status_code=status.HTTP_201_CREATED)
@limiter.limit(register_limit)
def register(
    request: Request,
    registration: RegisterRequest,
    services: HotelServices = Depends(get_hotel_services),
) -> SessionRead:
    return _session(services.users.register_customer(registration))


@router.get("/me", response_model=UserRead)
def me(current_user: UserRead = Depends(get_current_user)) -> UserRead:
    return current_user


@router.get("/unauthorized")
def unauthorized(actor: Optional[UserRead] = Depends(get_current_actor)) -> dict[str, str]:
    return {"detail": "You do not have access to that page", "home": home_path_for(actor)}


@router.get("/rooms", response_model=List[RoomRead])
def browse_rooms(
    room_type: Optional[RoomTypeEnum] = None,
    guests: int = Query(0, ge=0),
    services: HotelServices = Depends(get_hotel_services),
) -> List[RoomRead]:
    return services.rooms.search_rooms(room_type=room_type, guests=guests)


@router.get("/rooms/{room_id}", response_model=RoomRead)
def room_details(room_id: int, services: HotelServices = Depends(get_hotel_services)) -> RoomRead:
    return services.rooms.get_room(room_id)
