"""SQLAlchemy-backed read store for the hotels service.

Bundles the four reads the hotel access flow needs behind one object so the
service can be exercised against an in-memory fake.
"""

from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from models import Enrollment, Hotel, Ticket
from repositories.enrollment_repository import EnrollmentRepository
from repositories.hotel_repository import HotelRepository
from repositories.ticket_repository import TicketRepository


class SqlAlchemyHotelReadStore:
    """Satisfies ``services.hotels_service.HotelReadStore``."""

    def __init__(self, db: AsyncSession) -> None:
        self.enrollments = EnrollmentRepository(db)
        self.tickets = TicketRepository(db)
        self.hotels = HotelRepository(db)

    async def get_enrollment_by_user_id(self, user_id: int) -> Enrollment | None:
        return await self.enrollments.get_by_user_id(user_id)

    async def get_ticket_by_enrollment_id(self, enrollment_id: int) -> Ticket | None:
        return await self.tickets.get_by_enrollment_id(enrollment_id)

    async def list_hotels(self) -> Sequence[Hotel]:
        return await self.hotels.list_all()

    async def get_hotel_with_rooms(self, hotel_id: int) -> Hotel | None:
        return await self.hotels.get_with_rooms(hotel_id)
