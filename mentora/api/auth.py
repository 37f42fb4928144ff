# mentora/api/auth.py
"""
Authentication API

Endpoints:
- POST /auth/register - Create a mentor or mentee account
- POST /auth/login - Exchange credentials for a bearer token
- GET /auth/me - The authenticated user
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from mentora.api.errors import http_error
from mentora.database import get_db
from mentora.exceptions import MentoraError
from mentora.models.user import User
from mentora.schemas.auth import LoginRequest, RegisterRequest, Token
from mentora.schemas.user import UserResponse
from mentora.services import user_service
from mentora.utils.security import authenticate_user, create_token_for_user, get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


# ===== REGISTER ENDPOINT =====

@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: RegisterRequest, db: Session = Depends(get_db)):
    """Register a new mentor or mentee."""
    try:
        return user_service.register(
            db,
            name=user_data.name,
            email=user_data.email,
            password=user_data.password,
            role=user_data.role,
        )
    except MentoraError as exc:
        raise http_error(exc)


# ===== LOGIN ENDPOINT =====

@router.post("/login", response_model=Token)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Verify credentials and return an access token."""
    user = authenticate_user(db, credentials.email.strip(), credentials.password)
    if not user:
        logger.warning("Failed login attempt")
        raise HTTPException(status_code=401, detail="Invalid email or password")
    if not user.is_active:
        raise HTTPException(status_code=403, detail="Account is disabled")

    return Token(access_token=create_token_for_user(user), role=user.role)


@router.get("/me", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    return current_user
