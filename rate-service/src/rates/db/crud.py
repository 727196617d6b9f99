# rate-service/src/rates/db/crud.py
from typing import Iterable, List, Optional

from sqlalchemy import delete, insert, select, text, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..logging_config import get_logger
from .models import Found, NotFound, Rate, RateLookup, rate_table

logger = get_logger("rate_service.db.crud")

SYNC_ID_SEQUENCE = text(
    "SELECT setval(pg_get_serial_sequence('rate', 'id'), (SELECT COALESCE(MAX(id), 1) FROM rate))"
)


async def save(db: AsyncSession, rate: Rate) -> Rate:
    """
    Insert or update a rate by id (INSERT ... ON CONFLICT (id) DO UPDATE).

    Supports PostgreSQL and SQLite natively; other dialects fall back to
    select-then-insert/update.
    """
    if rate.id is None:
        return await create_rate(db, rate.type, rate.rate_value)

    values = rate.to_values()
    update_set = {"type": rate.type, "rate_value": rate.rate_value}
    dialect_name = db.get_bind().dialect.name

    if dialect_name == "postgresql":
        from sqlalchemy.dialects.postgresql import insert as pg_insert

        stmt = pg_insert(rate_table).values(**values)
        stmt = stmt.on_conflict_do_update(index_elements=["id"], set_=update_set)
        await db.execute(stmt)
        # explicit ids do not advance the SERIAL sequence
        await db.execute(SYNC_ID_SEQUENCE)

    elif dialect_name == "sqlite":
        from sqlalchemy.dialects.sqlite import insert as sqlite_insert

        stmt = sqlite_insert(rate_table).values(**values)
        stmt = stmt.on_conflict_do_update(index_elements=["id"], set_=update_set)
        await db.execute(stmt)

    else:
        res = await db.execute(select(rate_table.c.id).where(rate_table.c.id == rate.id))
        if res.first() is None:
            await db.execute(insert(rate_table).values(**values))
        else:
            await db.execute(update(rate_table).where(rate_table.c.id == rate.id).values(**update_set))

    return rate


async def save_all(db: AsyncSession, rates: Iterable[Rate]) -> List[Rate]:
    saved = [await save(db, r) for r in rates]
    logger.info("Saved %d rate(s)", len(saved))
    return saved


async def create_rate(db: AsyncSession, type_: str, rate_value: float) -> Rate:
    # validate before touching the database
    Rate(id=None, type=type_, rate_value=rate_value)
    res = await db.execute(insert(rate_table).values(type=type_, rate_value=rate_value))
    new_id = res.inserted_primary_key[0]
    return Rate(id=new_id, type=type_, rate_value=rate_value)


async def get_rate_by_id(db: AsyncSession, rate_id: int) -> Optional[Rate]:
    res = await db.execute(select(rate_table).where(rate_table.c.id == rate_id))
    row = res.first()
    return Rate.from_row(row) if row is not None else None


async def list_rates(db: AsyncSession) -> List[Rate]:
    res = await db.execute(select(rate_table).order_by(rate_table.c.id))
    return [Rate.from_row(row) for row in res]


async def delete_rate(db: AsyncSession, rate_id: int) -> bool:
    res = await db.execute(delete(rate_table).where(rate_table.c.id == rate_id))
    return res.rowcount > 0


async def find_by_type(db: AsyncSession, type_: str) -> RateLookup:
    """
    Exact, case-sensitive match on the unique `type` column.
    """
    q = select(rate_table).where(rate_table.c.type == type_)
    res = await db.execute(q)
    row = res.first()
    if row is None:
        return NotFound(type=type_)
    return Found(rate=Rate.from_row(row))
