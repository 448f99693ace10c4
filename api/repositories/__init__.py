"""Repository layer for database operations.

Repositories encapsulate all database queries, keeping routes thin and focused
on HTTP handling. Everything here is read-only: enrollments, tickets and
hotel listings are owned by other parts of the platform.
"""

from repositories.enrollment_repository import EnrollmentRepository
from repositories.hotel_read_store import SqlAlchemyHotelReadStore
from repositories.hotel_repository import HotelRepository
from repositories.session_repository import SessionRepository
from repositories.ticket_repository import TicketRepository
from repositories.utils import log_slow_query

__all__ = [
    "EnrollmentRepository",
    "HotelRepository",
    "SessionRepository",
    "SqlAlchemyHotelReadStore",
    "TicketRepository",
    "log_slow_query",
]
