"""Bearer-token authentication.

Provides:
- Session lookup dependency (overridable in tests)
- require_auth: resolves ``Authorization: Bearer <token>`` to a user ID
- UserId annotated dependency for authenticated routes

Tokens are opaque; a token is valid while a Session row carries it.
Issuing sessions belongs to the sign-in flow, not this service.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.database import DbSession
from core.logger import bind_contextvars, get_logger
from repositories.session_repository import SessionRepository

logger = get_logger(__name__)

_bearer_scheme = HTTPBearer(auto_error=False)


def get_session_repository(db: DbSession) -> SessionRepository:
    return SessionRepository(db)


async def require_auth(
    request: Request,
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(_bearer_scheme)
    ],
    sessions: Annotated[SessionRepository, Depends(get_session_repository)],
) -> int:
    """Raises 401 if not authenticated. Sets request.state.user_id."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Unauthorized")

    session = await sessions.get_by_token(credentials.credentials)
    if session is None:
        logger.info("auth.session.not_found")
        raise HTTPException(status_code=401, detail="Unauthorized")

    request.state.user_id = session.user_id
    bind_contextvars(user_id=session.user_id)
    return session.user_id


UserId = Annotated[int, Depends(require_auth)]
