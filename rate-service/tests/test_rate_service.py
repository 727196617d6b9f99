"""Tests for RateService.get_rate_by_type and the startup seed."""

import pytest
import pytest_asyncio
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from rates.db import crud
from rates.db.models import Rate
from rates.db.seed import SEED_RATES, initialize
from rates.errors import RateNotFound
from rates.services import rate_service
from rates.services.rate_service import RateService


@pytest_asyncio.fixture
async def seeded(session_factory: async_sessionmaker) -> async_sessionmaker:
    await initialize(session_factory)
    return session_factory


class TestGetRateByType:
    async def test_returns_seeded_rate(self, seeded):
        service = RateService(seeded)

        rate = await service.get_rate_by_type("PERSONAL")

        assert rate == Rate(1, "PERSONAL", 10.0)

    async def test_unknown_type_raises_rate_not_found(self, seeded):
        service = RateService(seeded)

        with pytest.raises(RateNotFound) as exc_info:
            await service.get_rate_by_type("AUTO")

        assert exc_info.value.type == "AUTO"
        assert str(exc_info.value) == "Rate Not Found: AUTO"

    async def test_input_is_passed_through_unvalidated(self, seeded):
        service = RateService(seeded)

        with pytest.raises(RateNotFound, match="Rate Not Found: housing "):
            await service.get_rate_by_type("housing ")

    async def test_database_error_propagates_unchanged(self, seeded, monkeypatch):
        error = SQLAlchemyError("connection lost")

        async def broken_find_by_type(db, type_):
            raise error

        monkeypatch.setattr(rate_service.crud, "find_by_type", broken_find_by_type)
        service = RateService(seeded)

        with pytest.raises(SQLAlchemyError) as exc_info:
            await service.get_rate_by_type("PERSONAL")

        assert exc_info.value is error
        assert not isinstance(exc_info.value, RateNotFound)


class TestInitialize:
    async def test_writes_seed_rows(self, session_factory):
        saved = await initialize(session_factory)

        assert saved == list(SEED_RATES)
        async with session_factory() as db:
            assert await crud.list_rates(db) == [
                Rate(1, "PERSONAL", 10.0),
                Rate(2, "HOUSING", 8.0),
            ]

    async def test_repeated_runs_leave_exactly_the_seed_set(self, session_factory):
        await initialize(session_factory)
        await initialize(session_factory)
        await initialize(session_factory)

        async with session_factory() as db:
            assert await crud.list_rates(db) == list(SEED_RATES)

    async def test_restores_seed_values_after_drift(self, session_factory):
        await initialize(session_factory)
        async with session_factory() as db:
            async with db.begin():
                await crud.save(db, Rate(1, "PERSONAL", 99.0))

        await initialize(session_factory)

        async with session_factory() as db:
            assert await crud.get_rate_by_id(db, 1) == Rate(1, "PERSONAL", 10.0)
