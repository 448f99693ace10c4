"""Repository for hotel and room listings."""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from models import Hotel
from repositories.utils import log_slow_query


class HotelRepository:
    """Read-only access to hotels. Listings are never mutated by this service."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @log_slow_query("hotels.list_all")
    async def list_all(self) -> Sequence[Hotel]:
        """All hotels, oldest first."""
        result = await self.db.execute(select(Hotel).order_by(Hotel.id))
        return result.scalars().all()

    @log_slow_query("hotels.get_with_rooms")
    async def get_with_rooms(self, hotel_id: int) -> Hotel | None:
        """Get a hotel by ID with its rooms loaded (ordered by room ID)."""
        result = await self.db.execute(
            select(Hotel).options(selectinload(Hotel.rooms)).where(Hotel.id == hotel_id)
        )
        return result.scalar_one_or_none()
