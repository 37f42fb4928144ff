# mentora/schemas/__init__.py

from .common import CamelModel, UserSummary

# Auth schemas
from .auth import RegisterRequest, LoginRequest, Token

# Availability schemas
from .availability import (
    AvailabilityBlockSchema,
    AvailabilityUpdate,
    AvailabilityResponse,
    SessionSlotResponse,
)

# User schemas
from .user import (
    UserResponse,
    ProfileUpdate,
    MentorListItem,
    MentorProfile,
    AdminUserCreate,
    RoleUpdate,
)

# Request schemas
from .request import RequestCreate, RequestStatusUpdate, MatchCreate, RequestResponse

# Session schemas
from .session import SessionCreate, FeedbackSubmit, SessionResponse

__all__ = [
    "CamelModel",
    "UserSummary",
    "RegisterRequest",
    "LoginRequest",
    "Token",
    "AvailabilityBlockSchema",
    "AvailabilityUpdate",
    "AvailabilityResponse",
    "SessionSlotResponse",
    "UserResponse",
    "ProfileUpdate",
    "MentorListItem",
    "MentorProfile",
    "AdminUserCreate",
    "RoleUpdate",
    "RequestCreate",
    "RequestStatusUpdate",
    "MatchCreate",
    "RequestResponse",
    "SessionCreate",
    "FeedbackSubmit",
    "SessionResponse",
]
