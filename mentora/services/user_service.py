# mentora/services/user_service.py
"""
User Service

Registration, profile management, the mentor directory and the admin
user-management operations.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mentora.crud import user as user_crud
from mentora.database import commit
from mentora.exceptions import ConflictError, ForbiddenError, InvalidInputError, NotFoundError
from mentora.models.user import User, UserRole
from mentora.services.authorization import ensure_role

logger = logging.getLogger(__name__)

SELF_SERVICE_ROLES = (UserRole.MENTOR, UserRole.MENTEE)
PROFILE_LIST_FIELDS = ("skills", "goals", "interests")


def _clean_list(values) -> List[str]:
    """Strip entries, drop blanks and case-insensitive duplicates, keep order."""
    seen = set()
    cleaned = []
    for value in values or []:
        item = str(value).strip()
        if item and item.lower() not in seen:
            seen.add(item.lower())
            cleaned.append(item)
    return cleaned


def _create_account(db: Session, *, name: str, email: str, password: str, role: UserRole) -> User:
    normalized_email = email.strip().lower()
    if user_crud.get_user_by_email(db, normalized_email):
        raise ConflictError("Email already registered.")

    try:
        user = user_crud.create_user(
            db, name=name.strip(), email=normalized_email, password=password, role=role
        )
        commit(db, action="creating a user")
    except IntegrityError:
        db.rollback()
        raise ConflictError("Email already registered.")
    db.refresh(user)
    return user


# ======================
# ACCOUNT
# ======================

def register(db: Session, *, name: str, email: str, password: str, role=UserRole.MENTEE) -> User:
    """Self-service signup. Admin accounts come from an admin or the bootstrap script."""
    role = UserRole(role)
    if role not in SELF_SERVICE_ROLES:
        raise ForbiddenError("Admin accounts cannot be self-registered.")

    user = _create_account(db, name=name, email=email, password=password, role=role)
    logger.info("User registered (user_id=%s, role=%s)", user.id, role.value)
    return user


def update_profile(db: Session, user: User, updates: dict) -> User:
    data = {key: value for key, value in updates.items() if value is not None}
    if not data:
        raise InvalidInputError("No profile fields provided.")

    if "name" in data:
        data["name"] = data["name"].strip()
    if "bio" in data:
        data["bio"] = data["bio"].strip()
    for field in PROFILE_LIST_FIELDS:
        if field in data:
            data[field] = _clean_list(data[field])

    user_crud.update_user_profile(db, user, data)
    user.is_profile_complete = bool(user.bio and (user.skills or user.goals or user.interests))
    commit(db, action="updating a profile")
    db.refresh(user)
    logger.info("Profile updated (user_id=%s, fields=%s)", user.id, sorted(data))
    return user


# ======================
# MENTOR DIRECTORY
# ======================

def list_mentors(db: Session, skill: Optional[str] = None) -> List[User]:
    """Active mentors, optionally those listing a skill (case-insensitive)."""
    mentors = [m for m in user_crud.get_users(db, UserRole.MENTOR) if m.is_active]
    if skill:
        needle = skill.strip().lower()
        mentors = [m for m in mentors if any(s.lower() == needle for s in (m.skills or []))]
    return mentors


def get_mentor_profile(db: Session, mentor_id: int) -> User:
    mentor = user_crud.get_user_with_role(db, mentor_id, UserRole.MENTOR)
    if not mentor:
        raise NotFoundError("Mentor not found or is not a mentor.")
    return mentor


# ======================
# ADMIN USER MANAGEMENT
# ======================

def admin_create_user(db: Session, admin: User, *, name: str, email: str, password: str, role) -> User:
    ensure_role(admin, UserRole.ADMIN, action="create users")
    user = _create_account(db, name=name, email=email, password=password, role=UserRole(role))
    logger.info("Admin %s created user %s with role %s", admin.id, user.id, user.role)
    return user


def list_users(db: Session, admin: User, role=None) -> List[User]:
    ensure_role(admin, UserRole.ADMIN, action="list users")
    parsed = None
    if role:
        try:
            parsed = UserRole(str(role).strip().lower())
        except ValueError:
            raise InvalidInputError("role must be one of: admin, mentor, mentee")
    return user_crud.get_users(db, parsed)


def update_user_role(db: Session, admin: User, user_id: int, role) -> User:
    """
    Change a user's role. Existing requests and sessions are left as they
    are; they keep pointing at the same user id.
    """
    ensure_role(admin, UserRole.ADMIN, action="change user roles")
    new_role = UserRole(role)
    if user_id == admin.id and new_role != UserRole.ADMIN:
        raise InvalidInputError("Admins cannot remove their own admin role.")

    user = user_crud.get_user(db, user_id)
    if not user:
        raise NotFoundError("User not found.")

    user.role = new_role
    commit(db, action="updating a user role")
    db.refresh(user)
    logger.info("Admin %s set role of user %s to %s", admin.id, user.id, new_role.value)
    return user


def delete_user(db: Session, admin: User, user_id: int) -> None:
    """Remove a user together with their requests, sessions and availability."""
    ensure_role(admin, UserRole.ADMIN, action="delete users")
    if user_id == admin.id:
        raise InvalidInputError("Admins cannot delete their own account.")
    if not user_crud.get_user(db, user_id):
        raise NotFoundError("User not found.")

    user_crud.delete_user_cascade(db, user_id)
    commit(db, action="deleting a user")
    logger.info("Admin %s deleted user %s", admin.id, user_id)
