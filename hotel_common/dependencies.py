"""Reusable FastAPI dependencies for actor resolution and role gating."""
from typing import Callable, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer

from .access import ROUTE_AREAS, AccessDecision, check_access
from .auth import decode_token
from .errors import AccessDeniedError, NotFoundError
from .models import RoleEnum
from .schemas import UserRead
from .services import HotelServices, get_services

oauth_scheme = OAuth2PasswordBearer(tokenUrl="/login", auto_error=False)


def get_hotel_services() -> HotelServices:
    return get_services()


def actor_from_token(token: Optional[str], services: HotelServices) -> Optional[UserRead]:
    if not token:
        return None
    payload = decode_token(token)
    subject: str | None = payload.get("sub")
    if subject is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing subject in token")
    try:
        return services.users.get_user(int(subject))
    except (NotFoundError, ValueError):
        # account removed since the token was issued
        return None


def get_current_actor(
    token: Optional[str] = Depends(oauth_scheme),
    services: HotelServices = Depends(get_hotel_services),
) -> Optional[UserRead]:
    return actor_from_token(token, services)


def resolve_actor(request: Request) -> Optional[UserRead]:
    """Best-effort actor lookup for handlers that run outside dependency injection."""

    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    try:
        return actor_from_token(token, get_services())
    except HTTPException:
        return None


def enforce(decision: AccessDecision) -> None:
    if decision is AccessDecision.REDIRECT_LOGIN:
        raise AccessDeniedError("Please sign in to continue", decision.redirect, status.HTTP_401_UNAUTHORIZED)
    if decision is AccessDecision.REDIRECT_UNAUTHORIZED:
        raise AccessDeniedError("You do not have access to this area", decision.redirect, status.HTTP_403_FORBIDDEN)


def get_current_user(actor: Optional[UserRead] = Depends(get_current_actor)) -> UserRead:
    enforce(check_access(actor, RoleEnum))
    return actor


def require_roles(*roles: RoleEnum) -> Callable[..., UserRead]:
    def dependency(actor: Optional[UserRead] = Depends(get_current_actor)) -> UserRead:
        enforce(check_access(actor, roles))
        return actor

    return dependency


def require_area(area: str) -> Callable[..., UserRead]:
    return require_roles(*ROUTE_AREAS[area])
