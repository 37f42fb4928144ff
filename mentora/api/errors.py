# mentora/api/errors.py
from fastapi import HTTPException

from mentora.exceptions import MentoraError


def http_error(exc: MentoraError) -> HTTPException:
    """Translate a domain error into the HTTP response the client sees."""
    return HTTPException(
        status_code=exc.status_code,
        detail=str(exc),
        headers={"X-Error-Code": exc.code},
    )
