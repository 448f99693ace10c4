"""Tests for enrollment repository."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from repositories.enrollment_repository import EnrollmentRepository
from tests.factories import EnrollmentFactory, UserFactory, create_async

# Mark all tests in this module as integration tests (database required)
pytestmark = pytest.mark.integration


class TestEnrollmentRepository:
    """Tests for EnrollmentRepository."""

    @pytest.fixture
    async def user(self, db_session: AsyncSession):
        return await create_async(UserFactory, db_session)

    async def test_get_by_user_id_found(self, db_session: AsyncSession, user):
        enrollment = await create_async(
            EnrollmentFactory, db_session, user_id=user.id
        )

        repo = EnrollmentRepository(db_session)
        result = await repo.get_by_user_id(user.id)

        assert result is not None
        assert result.id == enrollment.id
        assert result.cpf == enrollment.cpf

    async def test_get_by_user_id_not_found(self, db_session: AsyncSession, user):
        repo = EnrollmentRepository(db_session)
        assert await repo.get_by_user_id(user.id) is None

    async def test_other_users_enrollment_not_returned(
        self, db_session: AsyncSession, user
    ):
        other = await create_async(UserFactory, db_session)
        await create_async(EnrollmentFactory, db_session, user_id=other.id)

        repo = EnrollmentRepository(db_session)
        assert await repo.get_by_user_id(user.id) is None
