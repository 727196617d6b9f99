"""
Rate lookup business logic
"""

from sqlalchemy.ext.asyncio import async_sessionmaker

from ..db import crud
from ..db.models import Found, Rate
from ..errors import RateNotFound
from ..logging_config import get_logger

logger = get_logger("rate_service.services.rate_service")


class RateService:
    """
    Resolves a loan type to its rate.

    Owns the session factory (the persistence handle); the HTTP layer only
    ever talks to this object.
    """

    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    async def get_rate_by_type(self, type_: str) -> Rate:
        async with self.session_factory() as db:
            result = await crud.find_by_type(db, type_)

        if isinstance(result, Found):
            logger.info("Rate found type=%s rate_value=%s", type_, result.rate.rate_value)
            return result.rate

        logger.warning("Rate not found type=%s", result.type)
        raise RateNotFound(result.type)
