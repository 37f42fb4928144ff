# mentora/api/__init__.py

from . import admin
from . import auth
from . import mentor
from . import request
from . import session
from . import users

__all__ = [
    "auth",
    "users",
    "mentor",
    "request",
    "session",
    "admin",
]
