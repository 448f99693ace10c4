"""Repository for login session lookups."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models import Session
from repositories.utils import log_slow_query


class SessionRepository:
    """Resolves bearer tokens to sessions."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @log_slow_query("sessions.get_by_token")
    async def get_by_token(self, token: str) -> Session | None:
        result = await self.db.execute(select(Session).where(Session.token == token))
        return result.scalar_one_or_none()
