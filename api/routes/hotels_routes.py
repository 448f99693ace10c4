"""Hotel listing endpoints.

Both endpoints require a bearer token and a paid, in-person ticket whose type
includes lodging. Failures carry the empty form of the resource the endpoint
returns: ``[]`` for the collection, ``{}`` for a single hotel.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from core.auth import UserId
from core.database import DbSession
from core.logger import get_logger
from core.ratelimit import HOTELS_LIMIT, limiter
from repositories.hotel_read_store import SqlAlchemyHotelReadStore
from schemas import HotelResponse, HotelWithRoomsResponse
from services.hotels_service import (
    ErrorKind,
    HotelReadStore,
    HotelsServiceError,
    get_hotel_with_rooms,
    list_hotels,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/hotels", tags=["hotels"])

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.PAYMENT_REQUIRED: 402,
}

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"description": "Invalid hotel ID or store failure"},
    401: {"description": "Missing or invalid bearer token"},
    402: {"description": "Ticket unpaid, remote, or without hotel"},
    404: {"description": "No enrollment, ticket, or hotel"},
}


def get_hotel_read_store(db: DbSession) -> HotelReadStore:
    return SqlAlchemyHotelReadStore(db)


HotelStore = Annotated[HotelReadStore, Depends(get_hotel_read_store)]


def status_for_error(error: Exception) -> int:
    """Map a raised error to its HTTP status. Unclassified errors are 400."""
    if isinstance(error, HotelsServiceError):
        return _STATUS_BY_KIND.get(error.kind, 400)
    return 400


def parse_hotel_id(raw: str) -> int | None:
    """Return the hotel ID if ``raw`` is a positive integer, else None."""
    if not (raw.isascii() and raw.isdecimal()):
        return None
    hotel_id = int(raw)
    return hotel_id if hotel_id > 0 else None


def _error_response(error: Exception, empty_body: list | dict) -> JSONResponse:
    status = status_for_error(error)
    if not isinstance(error, HotelsServiceError):
        logger.exception("hotels.request.failed", http_status=status)
    return JSONResponse(status_code=status, content=empty_body)


@router.get(
    "",
    response_model=list[HotelResponse],
    responses={k: v for k, v in _ERROR_RESPONSES.items() if k != 400},
)
@limiter.limit(HOTELS_LIMIT)
async def list_hotels_endpoint(
    request: Request,
    user_id: UserId,
    store: HotelStore,
) -> Response | list[HotelResponse]:
    """List all hotels available to the authenticated user."""
    try:
        return await list_hotels(store, user_id)
    except Exception as e:
        return _error_response(e, [])


@router.get(
    "/{hotel_id}",
    response_model=HotelWithRoomsResponse,
    responses=_ERROR_RESPONSES,
)
@limiter.limit(HOTELS_LIMIT)
async def get_hotel_endpoint(
    request: Request,
    hotel_id: str,
    user_id: UserId,
    store: HotelStore,
) -> Response | HotelWithRoomsResponse:
    """Get a hotel and its rooms."""
    parsed_id = parse_hotel_id(hotel_id)
    if parsed_id is None:
        return JSONResponse(status_code=400, content={})

    try:
        return await get_hotel_with_rooms(store, user_id, parsed_id)
    except Exception as e:
        return _error_response(e, {})
