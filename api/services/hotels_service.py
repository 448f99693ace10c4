"""Hotel access business logic.

This module handles:
- The hotel eligibility rule (enrollment -> ticket -> ticket type)
- Listing hotels and fetching a single hotel with its rooms
- The typed errors routes translate into status codes

Routes should delegate all hotel access decisions to this module.
"""

from collections.abc import Sequence
from enum import StrEnum
from typing import Protocol

from core.logger import bind_contextvars, get_logger
from models import Enrollment, Hotel, Ticket, TicketStatus
from schemas import HotelResponse, HotelWithRoomsResponse

logger = get_logger(__name__)


class HotelReadStore(Protocol):
    """The four reads the hotel access flow depends on."""

    async def get_enrollment_by_user_id(self, user_id: int) -> Enrollment | None: ...

    async def get_ticket_by_enrollment_id(
        self, enrollment_id: int
    ) -> Ticket | None: ...

    async def list_hotels(self) -> Sequence[Hotel]: ...

    async def get_hotel_with_rooms(self, hotel_id: int) -> Hotel | None: ...


class ErrorKind(StrEnum):
    NOT_FOUND = "not_found"
    PAYMENT_REQUIRED = "payment_required"


class DenialReason(StrEnum):
    NO_ENROLLMENT = "no_enrollment"
    NO_TICKET = "no_ticket"
    TICKET_NOT_PAID = "ticket_not_paid"
    REMOTE_TICKET = "remote_ticket"
    HOTEL_NOT_INCLUDED = "hotel_not_included"
    NO_HOTELS = "no_hotels"
    HOTEL_NOT_FOUND = "hotel_not_found"


class HotelsServiceError(Exception):
    """Base for failures routes translate into a status code."""

    kind: ErrorKind

    def __init__(self, reason: DenialReason, message: str | None = None):
        self.reason = reason
        super().__init__(message or reason.value)


class NotFoundError(HotelsServiceError):
    """Raised when the enrollment, ticket or hotel being asked for does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, reason: DenialReason):
        super().__init__(reason, "No result for this search")


class PaymentRequiredError(HotelsServiceError):
    """Raised when the user's ticket does not grant lodging."""

    kind = ErrorKind.PAYMENT_REQUIRED

    def __init__(self, reason: DenialReason):
        super().__init__(reason, "You must make the payment")


def _deny(error: HotelsServiceError, user_id: int) -> HotelsServiceError:
    logger.info("hotels.access.denied", user_id=user_id, reason=error.reason.value)
    return error


async def verify_hotel_eligibility(store: HotelReadStore, user_id: int) -> None:
    """Check that a user may view hotel data.

    Checks run in order and stop at the first failure, so an unpaid ticket
    is reported as PaymentRequired even when its type includes a hotel, and
    a missing enrollment is always NotFound.

    Raises:
        NotFoundError: No enrollment, or no ticket for the enrollment
        PaymentRequiredError: Ticket unpaid, remote, or without hotel
    """
    enrollment = await store.get_enrollment_by_user_id(user_id)
    if enrollment is None:
        raise _deny(NotFoundError(DenialReason.NO_ENROLLMENT), user_id)

    ticket = await store.get_ticket_by_enrollment_id(enrollment.id)
    if ticket is None:
        raise _deny(NotFoundError(DenialReason.NO_TICKET), user_id)

    if ticket.status != TicketStatus.PAID:
        raise _deny(PaymentRequiredError(DenialReason.TICKET_NOT_PAID), user_id)

    # Remote attendance never includes lodging
    if ticket.ticket_type.is_remote:
        raise _deny(PaymentRequiredError(DenialReason.REMOTE_TICKET), user_id)

    if not ticket.ticket_type.includes_hotel:
        raise _deny(PaymentRequiredError(DenialReason.HOTEL_NOT_INCLUDED), user_id)

    bind_contextvars(hotel_access="granted")


async def list_hotels(store: HotelReadStore, user_id: int) -> list[HotelResponse]:
    """List every hotel for an eligible user.

    An empty listing is reported as NotFoundError rather than an empty success.
    """
    await verify_hotel_eligibility(store, user_id)

    hotels = await store.list_hotels()
    if not hotels:
        raise _deny(NotFoundError(DenialReason.NO_HOTELS), user_id)

    return [HotelResponse.model_validate(hotel) for hotel in hotels]


async def get_hotel_with_rooms(
    store: HotelReadStore, user_id: int, hotel_id: int
) -> HotelWithRoomsResponse:
    """Fetch one hotel and its rooms for an eligible user.

    Args:
        store: Read store for enrollment, ticket and hotel lookups
        user_id: Authenticated user's ID
        hotel_id: Positive hotel ID (already validated by the caller)

    Raises:
        NotFoundError: Eligibility lookups failed or no hotel has this ID
        PaymentRequiredError: Ticket does not grant lodging
    """
    await verify_hotel_eligibility(store, user_id)

    hotel = await store.get_hotel_with_rooms(hotel_id)
    if hotel is None:
        raise _deny(NotFoundError(DenialReason.HOTEL_NOT_FOUND), user_id)

    return HotelWithRoomsResponse.model_validate(hotel)
