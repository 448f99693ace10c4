"""Repository for ticket reads."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from models import Ticket
from repositories.utils import log_slow_query


class TicketRepository:
    """Read-only access to tickets and their ticket types."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @log_slow_query("tickets.get_by_enrollment_id")
    async def get_by_enrollment_id(self, enrollment_id: int) -> Ticket | None:
        """Get the ticket for an enrollment with its TicketType eagerly loaded.

        An enrollment holds a single ticket; if several exist the oldest wins.
        """
        result = await self.db.execute(
            select(Ticket)
            .options(selectinload(Ticket.ticket_type))
            .where(Ticket.enrollment_id == enrollment_id)
            .order_by(Ticket.id)
            .limit(1)
        )
        return result.scalar_one_or_none()
