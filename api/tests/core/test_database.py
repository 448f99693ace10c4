"""Tests for core.database.

Unit tests cover get_db session handling; the connectivity check runs
against PostgreSQL.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from core.database import check_db_connection, get_db, init_db


def _request_with_session(session) -> MagicMock:
    session_cm = MagicMock()
    session_cm.__aenter__ = AsyncMock(return_value=session)
    session_cm.__aexit__ = AsyncMock(return_value=False)

    request = MagicMock()
    request.app.state.session_maker = MagicMock(return_value=session_cm)
    return request


@pytest.mark.unit
class TestGetDb:
    async def test_yields_session_without_commit(self):
        session = AsyncMock()
        gen = get_db(_request_with_session(session))

        assert await gen.__anext__() is session
        with pytest.raises(StopAsyncIteration):
            await gen.__anext__()

        session.commit.assert_not_called()
        session.rollback.assert_not_called()

    async def test_rolls_back_on_exception(self):
        session = AsyncMock()
        gen = get_db(_request_with_session(session))
        await gen.__anext__()

        with pytest.raises(RuntimeError):
            await gen.athrow(RuntimeError("handler failed"))

        session.rollback.assert_awaited_once()

    async def test_rollback_failure_keeps_original_error(self):
        session = AsyncMock()
        session.rollback.side_effect = ConnectionError("gone")
        gen = get_db(_request_with_session(session))
        await gen.__anext__()

        with pytest.raises(RuntimeError, match="handler failed"):
            await gen.athrow(RuntimeError("handler failed"))


@pytest.mark.integration
class TestConnectivity:
    async def test_check_db_connection(self, test_engine):
        await check_db_connection(test_engine)

    async def test_init_db(self, test_engine):
        await init_db(test_engine)
