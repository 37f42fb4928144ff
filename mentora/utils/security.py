from datetime import UTC, datetime, timedelta
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from mentora import models
from mentora.config import settings
from mentora.database import get_db


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login")

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


# ==========================
# PASSWORDS
# ==========================

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


# ==========================
# TOKENS
# ==========================

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a JWT carrying `data`; the default lifetime comes from settings."""
    lifetime = expires_delta
    if lifetime is None:
        lifetime = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    claims = {**data, "exp": datetime.now(UTC) + lifetime}
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def create_token_for_user(user: models.User) -> str:
    """Token whose subject is the account e-mail, with the role as a claim."""
    return create_access_token({"sub": user.email, "role": models.UserRole(user.role).value})


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


def _token_subject(token: str) -> str:
    """The `sub` claim of a valid, unexpired token; 401 otherwise."""
    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise _unauthorized()
    subject = claims.get("sub")
    if not subject:
        raise _unauthorized()
    return subject


# ==========================
# AUTHENTICATION
# ==========================

def _find_by_email(db: Session, email: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.email == email.strip().lower()).first()


def authenticate_user(db: Session, email: str, password: str):
    """The matching user, or False when the e-mail or password is wrong."""
    user = _find_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        return False
    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> models.User:
    user = _find_by_email(db, _token_subject(token))
    if user is None:
        raise _unauthorized()
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Account is disabled")
    return user
