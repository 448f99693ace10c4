"""Repository for enrollment reads."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models import Enrollment
from repositories.utils import log_slow_query


class EnrollmentRepository:
    """Read-only access to enrollments. Rows are created by the enrollment flow."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @log_slow_query("enrollments.get_by_user_id")
    async def get_by_user_id(self, user_id: int) -> Enrollment | None:
        """Get the enrollment owned by a user (at most one exists)."""
        result = await self.db.execute(
            select(Enrollment).where(Enrollment.user_id == user_id)
        )
        return result.scalar_one_or_none()
