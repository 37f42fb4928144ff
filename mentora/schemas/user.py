from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr, Field

from mentora.models.user import UserRole

from .availability import AvailabilityBlockSchema
from .common import CamelModel


# ======================
# OWN ACCOUNT
# ======================

class UserResponse(CamelModel):
    id: int
    name: str
    email: str
    role: UserRole
    bio: Optional[str] = ""
    skills: List[str] = []
    goals: List[str] = []
    interests: List[str] = []
    is_profile_complete: bool = False
    is_active: bool = True
    created_at: Optional[datetime] = None


class ProfileUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=3, max_length=100)
    bio: Optional[str] = Field(None, max_length=500)
    skills: Optional[List[str]] = None
    goals: Optional[List[str]] = None
    interests: Optional[List[str]] = None


# ======================
# MENTOR DIRECTORY
# ======================

class MentorListItem(CamelModel):
    """Mentor card without availability."""
    id: int
    name: str
    email: str
    bio: Optional[str] = ""
    skills: List[str] = []
    goals: List[str] = []
    interests: List[str] = []


class MentorProfile(MentorListItem):
    availability: List[AvailabilityBlockSchema] = []


# ======================
# ADMIN
# ======================

class AdminUserCreate(CamelModel):
    name: str = Field(..., min_length=3, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=72)
    role: UserRole


class RoleUpdate(CamelModel):
    role: UserRole
