'''
Role helpers: labels, access checks, dormitory scoping and the page guard.
Authorization is enforced by the backend; these only mirror it for display.
'''
from typing import Iterable, Optional, Protocol, TypeVar, Union

from ..models.enums import Dormitory, UserRole
from ..models.user import User

PROTECTED_PREFIXES = ("/dashboard", "/profile", "/reservations", "/admin")
ADMIN_PREFIXES = ("/admin",)

LOGIN_PATH = "/auth/login"
DASHBOARD_PATH = "/dashboard"

ROLE_NAMES = {
    UserRole.ADMIN: "مدیر کل",
    UserRole.ADMIN_DORMITORY_1: "مدیر خوابگاه ۱",
    UserRole.ADMIN_DORMITORY_2: "مدیر خوابگاه ۲",
    UserRole.USER: "کاربر",
}

_ROLE_DORMITORY = {
    UserRole.ADMIN_DORMITORY_1: Dormitory.DORMITORY_1,
    UserRole.ADMIN_DORMITORY_2: Dormitory.DORMITORY_2,
}


class HasDormitory(Protocol):
    dormitory: Optional[str]


D = TypeVar("D", bound=HasDormitory)


def get_role_name(role: Union[str, UserRole]) -> str:
    try:
        return ROLE_NAMES[UserRole(role)]
    except ValueError:
        return "نامشخص"


def has_access(user: Optional[User], required_roles: Iterable[Union[str, UserRole]]) -> bool:
    if user is None:
        return False
    return user.role in {UserRole(role) for role in required_roles}


def is_admin(role: Union[str, UserRole, None]) -> bool:
    """Global and dormitory admins alike."""
    return bool(role) and str(getattr(role, "value", role)).startswith("admin")


def dormitory_scope(role: Union[str, UserRole]) -> Optional[Dormitory]:
    """The dormitory a scoped admin is restricted to; None for unrestricted roles."""
    try:
        return _ROLE_DORMITORY.get(UserRole(role))
    except ValueError:
        return None


def filter_for_user(items: Iterable[D], user: User) -> list[D]:
    """
    Display-side mirror of the backend's dormitory scoping:
    a dormitory admin only sees items of their own dormitory.
    """
    scope = dormitory_scope(user.role)
    if scope is None:
        return list(items)
    return [item for item in items if item.dormitory == scope]


def resolve_page_redirect(path: str, token: Optional[str], user: Optional[User] = None) -> Optional[str]:
    """
    Where a page request has to be sent instead, or None if it may proceed.
    Admin pages need a verified user whose role is an admin role.
    """
    if not path.startswith(PROTECTED_PREFIXES):
        return None
    if not token:
        return LOGIN_PATH
    if path.startswith(ADMIN_PREFIXES):
        if user is None:
            return LOGIN_PATH
        if not is_admin(user.role):
            return DASHBOARD_PATH
    return None
