"""Tests for hotel repository."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from repositories.hotel_repository import HotelRepository
from tests.factories import HotelFactory, RoomFactory, build_hotel_with_rooms

# Mark all tests in this module as integration tests (database required)
pytestmark = pytest.mark.integration


class TestHotelRepository:
    """Tests for HotelRepository."""

    async def test_list_all_empty(self, db_session: AsyncSession):
        repo = HotelRepository(db_session)
        assert list(await repo.list_all()) == []

    async def test_list_all_ordered_by_id(self, db_session: AsyncSession):
        hotels = HotelFactory.build_batch(3)
        db_session.add_all(reversed(hotels))
        await db_session.flush()

        repo = HotelRepository(db_session)
        result = await repo.list_all()

        assert [h.id for h in result] == sorted(h.id for h in hotels)

    async def test_get_with_rooms_loads_rooms_in_id_order(
        self, db_session: AsyncSession
    ):
        hotel = build_hotel_with_rooms(3)
        hotel.rooms.reverse()
        db_session.add(hotel)
        await db_session.flush()
        db_session.expunge_all()

        repo = HotelRepository(db_session)
        result = await repo.get_with_rooms(hotel.id)

        assert result is not None
        assert result.id == hotel.id
        room_ids = [r.id for r in result.rooms]
        assert room_ids == sorted(room_ids)
        assert len(room_ids) == 3

    async def test_get_with_rooms_only_returns_own_rooms(
        self, db_session: AsyncSession
    ):
        hotel = build_hotel_with_rooms(2)
        other = build_hotel_with_rooms(1)
        db_session.add_all([hotel, other])
        await db_session.flush()
        db_session.expunge_all()

        repo = HotelRepository(db_session)
        result = await repo.get_with_rooms(hotel.id)

        assert result is not None
        assert {r.hotel_id for r in result.rooms} == {hotel.id}

    async def test_get_with_rooms_hotel_without_rooms(self, db_session: AsyncSession):
        hotel = HotelFactory.build()
        db_session.add(hotel)
        await db_session.flush()
        db_session.expunge_all()

        repo = HotelRepository(db_session)
        result = await repo.get_with_rooms(hotel.id)

        assert result is not None
        assert result.rooms == []

    async def test_get_with_rooms_not_found(self, db_session: AsyncSession):
        repo = HotelRepository(db_session)
        assert await repo.get_with_rooms(999_999) is None

    async def test_deleting_hotel_removes_rooms(self, db_session: AsyncSession):
        hotel = HotelFactory.build()
        hotel.rooms = [RoomFactory.build(hotel_id=hotel.id)]
        db_session.add(hotel)
        await db_session.flush()

        await db_session.delete(hotel)
        await db_session.flush()
        db_session.expunge_all()

        repo = HotelRepository(db_session)
        assert await repo.get_with_rooms(hotel.id) is None
