# mentora/api/admin.py
"""
Admin API
Account management, match overrides and session oversight.
Every operation checks the admin role inside its service.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from mentora.api.errors import http_error
from mentora.database import get_db
from mentora.exceptions import MentoraError
from mentora.models.user import User
from mentora.schemas.request import MatchCreate, RequestResponse
from mentora.schemas.session import SessionResponse
from mentora.schemas.user import AdminUserCreate, RoleUpdate, UserResponse
from mentora.services import request_service, session_service, user_service
from mentora.utils import get_current_user

router = APIRouter(prefix="/admin", tags=["Admin"])


# ─────────────────────────────────────────
# USERS
# ─────────────────────────────────────────
@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: AdminUserCreate,
    admin: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return user_service.admin_create_user(
            db,
            admin,
            name=payload.name,
            email=payload.email,
            password=payload.password,
            role=payload.role,
        )
    except MentoraError as exc:
        raise http_error(exc)


@router.get("/users", response_model=List[UserResponse])
def get_all_users(
    role: Optional[str] = Query(None, description="admin, mentor or mentee"),
    admin: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return user_service.list_users(db, admin, role)
    except MentoraError as exc:
        raise http_error(exc)


@router.put("/users/{user_id}/role", response_model=UserResponse)
def update_user_role(
    user_id: int,
    payload: RoleUpdate,
    admin: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return user_service.update_user_role(db, admin, user_id, payload.role)
    except MentoraError as exc:
        raise http_error(exc)


@router.delete("/users/{user_id}")
def delete_user(
    user_id: int,
    admin: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Deletes the user along with their requests, sessions and availability."""
    try:
        user_service.delete_user(db, admin, user_id)
    except MentoraError as exc:
        raise http_error(exc)
    return {"message": "User and associated data deleted successfully.", "user_id": user_id}


# ─────────────────────────────────────────
# MATCHES
# ─────────────────────────────────────────
@router.get("/matches", response_model=List[RequestResponse])
def get_matches(
    admin: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return request_service.list_matches(db, admin)
    except MentoraError as exc:
        raise http_error(exc)


@router.post("/matches", response_model=RequestResponse, status_code=status.HTTP_201_CREATED)
def create_match(
    payload: MatchCreate,
    admin: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return request_service.create_match(
            db, admin, payload.mentee_id, payload.mentor_id, payload.message
        )
    except MentoraError as exc:
        raise http_error(exc)


# ─────────────────────────────────────────
# SESSIONS
# ─────────────────────────────────────────
@router.get("/sessions", response_model=List[SessionResponse])
def get_all_sessions(
    status: Optional[str] = None,
    admin: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return session_service.list_all_sessions(db, admin, status)
    except MentoraError as exc:
        raise http_error(exc)


@router.delete("/sessions/clear")
def clear_sessions(
    admin: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        deleted = session_service.clear_sessions(db, admin)
    except MentoraError as exc:
        raise http_error(exc)
    return {"message": "All sessions cleared.", "deleted": deleted}
