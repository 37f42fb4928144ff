# mentora/services/authorization.py
"""Single authorization gate shared by every service operation."""

from mentora.exceptions import ForbiddenError, InvalidRoleError
from mentora.models.user import User, UserRole


def has_role(user: User, *roles: UserRole) -> bool:
    return user is not None and UserRole(user.role) in roles


def ensure_role(user: User, *roles: UserRole, action: str = "perform this action") -> User:
    if not has_role(user, *roles):
        allowed = " or ".join(role.value for role in roles)
        raise InvalidRoleError(f"Access denied. Only {allowed} users can {action}.")
    return user


def ensure_party(user: User, *user_ids: int, action: str = "access this resource") -> User:
    """The principal must be one of the entity's stored mentor/mentee references."""
    if user is None or user.id not in user_ids:
        raise ForbiddenError(f"Not authorized to {action}.")
    return user
