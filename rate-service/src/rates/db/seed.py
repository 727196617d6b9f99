"""
Seed data written on every rate-service start.

Seeding goes through save_all (upsert by id), so running it again after a
restart overwrites the same rows instead of duplicating them.
"""

from typing import List

from sqlalchemy.ext.asyncio import async_sessionmaker

from ..logging_config import get_logger
from . import crud
from .models import Rate

logger = get_logger("rate_service.db.seed")

SEED_RATES = (
    Rate(id=1, type="PERSONAL", rate_value=10.0),
    Rate(id=2, type="HOUSING", rate_value=8.0),
)


async def initialize(session_factory: async_sessionmaker) -> List[Rate]:
    async with session_factory() as db:
        async with db.begin():
            saved = await crud.save_all(db, SEED_RATES)
    logger.info("Seeded rates: %s", ", ".join(r.type for r in saved))
    return saved
