from pydantic import EmailStr, Field

from mentora.models.user import UserRole

from .common import CamelModel


class RegisterRequest(CamelModel):
    name: str = Field(..., min_length=3, max_length=100)
    email: EmailStr
    # Bcrypt has a 72-byte limit.
    password: str = Field(..., min_length=8, max_length=72)
    role: UserRole = UserRole.MENTEE


class LoginRequest(CamelModel):
    email: EmailStr
    password: str


class Token(CamelModel):
    access_token: str
    token_type: str = "bearer"
    role: UserRole
