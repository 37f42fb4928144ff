# mentora/api/users.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from mentora.api.errors import http_error
from mentora.database import get_db
from mentora.exceptions import MentoraError
from mentora.models.user import User
from mentora.schemas.user import ProfileUpdate, UserResponse
from mentora.services import user_service
from mentora.utils import get_current_user

router = APIRouter(prefix="/users", tags=["Users"])


# ======================
# GET: Own profile
# ======================
@router.get("/me", response_model=UserResponse)
def get_my_profile(current_user: User = Depends(get_current_user)):
    return current_user


# ======================
# PUT: Update own profile
# ======================
@router.put("/me", response_model=UserResponse)
def update_my_profile(
    profile: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return user_service.update_profile(db, current_user, profile.model_dump(exclude_unset=True))
    except MentoraError as exc:
        raise http_error(exc)
