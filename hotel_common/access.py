"""Role based access decisions shared by every gated route and action."""
from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, Iterable, Optional

from .models import RoleEnum
from .schemas import UserRead

LOGIN_PATH = "/login"
UNAUTHORIZED_PATH = "/unauthorized"


class AccessDecision(str, Enum):
    PERMIT = "permit"
    REDIRECT_LOGIN = "redirect_login"
    REDIRECT_UNAUTHORIZED = "redirect_unauthorized"

    @property
    def redirect(self) -> Optional[str]:
        if self is AccessDecision.REDIRECT_LOGIN:
            return LOGIN_PATH
        if self is AccessDecision.REDIRECT_UNAUTHORIZED:
            return UNAUTHORIZED_PATH
        return None


ROUTE_AREAS: Dict[str, FrozenSet[RoleEnum]] = {
    "customer": frozenset({RoleEnum.CUSTOMER}),
    "staff": frozenset({RoleEnum.STAFF}),
    "admin": frozenset({RoleEnum.ADMIN}),
}

_HOME_PATHS = {
    RoleEnum.ADMIN: "/admin",
    RoleEnum.STAFF: "/staff",
    RoleEnum.CUSTOMER: "/customer",
}


def check_access(actor: Optional[UserRead], allowed_roles: Iterable[RoleEnum]) -> AccessDecision:
    """Decide whether ``actor`` may enter an area open to ``allowed_roles``.

    Anonymous actors are sent to login; signed-in actors without one of the
    allowed roles are sent to the unauthorized page.
    """

    if actor is None:
        return AccessDecision.REDIRECT_LOGIN
    if actor.role not in set(allowed_roles):
        return AccessDecision.REDIRECT_UNAUTHORIZED
    return AccessDecision.PERMIT


def check_area(actor: Optional[UserRead], area: str) -> AccessDecision:
    return check_access(actor, ROUTE_AREAS[area])


def home_path_for(actor: Optional[UserRead]) -> str:
    if actor is None:
        return LOGIN_PATH
    return _HOME_PATHS.get(actor.role, LOGIN_PATH)
