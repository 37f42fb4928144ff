# mentora/api/request.py
"""
Mentorship Request API

Endpoints:
- POST /requests/ - Mentee sends a request to a mentor
- GET /requests/?role=sent|received - Requests the caller sent or received
- PUT /requests/{request_id} - Mentor accepts or rejects a pending request
"""

from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from mentora.api.errors import http_error
from mentora.database import get_db
from mentora.exceptions import MentoraError
from mentora.models.user import User
from mentora.schemas.request import RequestCreate, RequestResponse, RequestStatusUpdate
from mentora.services import request_service
from mentora.utils import get_current_user

router = APIRouter(prefix="/requests", tags=["requests"])


@router.post("/", response_model=RequestResponse, status_code=status.HTTP_201_CREATED)
def send_request(
    payload: RequestCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return request_service.send_request(db, current_user, payload.mentor_id, payload.message)
    except MentoraError as exc:
        raise http_error(exc)


@router.get("/", response_model=List[RequestResponse])
def get_requests(
    role: str = Query(..., description="'sent' for a mentee, 'received' for a mentor"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return request_service.list_requests(db, current_user, role)
    except MentoraError as exc:
        raise http_error(exc)


@router.put("/{request_id}", response_model=RequestResponse)
def update_request_status(
    request_id: int,
    payload: RequestStatusUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Body: {"status": "ACCEPTED" | "REJECTED"}. No session is created."""
    try:
        return request_service.update_request_status(db, request_id, payload.status, current_user)
    except MentoraError as exc:
        raise http_error(exc)
