"""
Create the first admin account from environment variables.

    ENABLE_ADMIN_BOOTSTRAP=true ADMIN_BOOTSTRAP_CONFIRM=CREATE-FIRST-ADMIN \
    ADMIN_NAME="Site Admin" ADMIN_EMAIL=admin@example.org ADMIN_PASSWORD=... \
    python -m mentora.scripts.bootstrap_admin
"""

import logging
import os
import re
import sys
from typing import Optional

from mentora.crud import user as user_crud
from mentora.database import SessionLocal, commit, create_db_and_tables
from mentora.models.user import User, UserRole

logger = logging.getLogger(__name__)

CONFIRM_PHRASE = "CREATE-FIRST-ADMIN"
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _is_truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "y", "on"}


def _required_env(key: str) -> str:
    value = os.getenv(key, "").strip()
    if not value:
        raise ValueError(f"Missing required environment variable: {key}")
    return value


def _validate_password(password: str) -> None:
    if len(password) < 8:
        raise ValueError("ADMIN_PASSWORD must be at least 8 characters.")
    if len(password.encode("utf-8")) > 72:
        raise ValueError("ADMIN_PASSWORD must be <= 72 bytes (bcrypt limit).")
    if not re.search(r"[A-Za-z]", password) or not re.search(r"\d", password):
        raise ValueError("ADMIN_PASSWORD must contain letters and digits.")


def bootstrap_admin(db=None) -> int:
    """Returns a process exit code. Refuses to run once any admin exists."""
    owns_session = db is None
    try:
        if not _is_truthy(os.getenv("ENABLE_ADMIN_BOOTSTRAP")):
            raise ValueError("Bootstrap disabled. Set ENABLE_ADMIN_BOOTSTRAP=true to run.")
        if _required_env("ADMIN_BOOTSTRAP_CONFIRM") != CONFIRM_PHRASE:
            raise ValueError(
                f"Invalid ADMIN_BOOTSTRAP_CONFIRM. Expected exact phrase: {CONFIRM_PHRASE}"
            )

        name = _required_env("ADMIN_NAME")
        email = _required_env("ADMIN_EMAIL").lower()
        password = _required_env("ADMIN_PASSWORD")
        if not EMAIL_RE.match(email):
            raise ValueError("ADMIN_EMAIL is not a valid email format.")
        _validate_password(password)

        if owns_session:
            create_db_and_tables()
            db = SessionLocal()
        try:
            if db.query(User).filter(User.role == UserRole.ADMIN).count() > 0:
                raise ValueError(
                    "Admin bootstrap blocked: an admin already exists. "
                    "This command is one-time for first admin creation."
                )
            if user_crud.get_user_by_email(db, email):
                raise ValueError("ADMIN_EMAIL is already registered.")

            user_crud.create_user(db, name=name, email=email, password=password, role=UserRole.ADMIN)
            commit(db, action="bootstrapping the first admin")
            print(f"Admin created successfully: {email}")
            return 0
        except Exception:
            db.rollback()
            raise
        finally:
            if owns_session:
                db.close()
    except Exception as exc:
        logger.error("Admin bootstrap failed: %s", exc)
        print(f"Admin bootstrap failed: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    raise SystemExit(bootstrap_admin())
