# loan-service/src/loans/db/crud.py
from typing import Iterable, List, Optional

from sqlalchemy import delete, insert, select, text, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..logging_config import get_logger
from .models import Loan, loan_table

logger = get_logger("loan_service.db.crud")

SYNC_ID_SEQUENCE = text(
    "SELECT setval(pg_get_serial_sequence('loan', 'id'), (SELECT COALESCE(MAX(id), 1) FROM loan))"
)


async def save(db: AsyncSession, loan: Loan) -> Loan:
    """
    Insert or update a loan by id. Loans without an id get one assigned.
    """
    if loan.id is None:
        return await create_loan(db, loan.type)

    dialect_name = db.get_bind().dialect.name

    if dialect_name == "postgresql":
        from sqlalchemy.dialects.postgresql import insert as pg_insert

        stmt = pg_insert(loan_table).values(id=loan.id, type=loan.type)
        await db.execute(stmt.on_conflict_do_update(index_elements=["id"], set_={"type": loan.type}))
        # explicit ids do not advance the SERIAL sequence
        await db.execute(SYNC_ID_SEQUENCE)

    elif dialect_name == "sqlite":
        from sqlalchemy.dialects.sqlite import insert as sqlite_insert

        stmt = sqlite_insert(loan_table).values(id=loan.id, type=loan.type)
        await db.execute(stmt.on_conflict_do_update(index_elements=["id"], set_={"type": loan.type}))

    else:
        res = await db.execute(select(loan_table.c.id).where(loan_table.c.id == loan.id))
        if res.first() is None:
            await db.execute(insert(loan_table).values(id=loan.id, type=loan.type))
        else:
            await db.execute(update(loan_table).where(loan_table.c.id == loan.id).values(type=loan.type))

    return loan


async def save_all(db: AsyncSession, loans: Iterable[Loan]) -> List[Loan]:
    saved = [await save(db, loan) for loan in loans]
    logger.info("Saved %d loan(s)", len(saved))
    return saved


async def create_loan(db: AsyncSession, type_: str) -> Loan:
    Loan(id=None, type=type_)
    res = await db.execute(insert(loan_table).values(type=type_))
    return Loan(id=res.inserted_primary_key[0], type=type_)


async def get_loan_by_id(db: AsyncSession, loan_id: int) -> Optional[Loan]:
    res = await db.execute(select(loan_table).where(loan_table.c.id == loan_id))
    row = res.first()
    return Loan.from_row(row) if row is not None else None


async def list_loans(db: AsyncSession) -> List[Loan]:
    res = await db.execute(select(loan_table).order_by(loan_table.c.id))
    return [Loan.from_row(row) for row in res]


async def delete_loan(db: AsyncSession, loan_id: int) -> bool:
    res = await db.execute(delete(loan_table).where(loan_table.c.id == loan_id))
    return res.rowcount > 0


async def find_by_type(db: AsyncSession, type_: str) -> List[Loan]:
    """
    All loans whose type equals `type_` exactly, ordered by id.
    """
    q = select(loan_table).where(loan_table.c.type == type_).order_by(loan_table.c.id)
    res = await db.execute(q)
    loans = [Loan.from_row(row) for row in res]
    logger.info("find_by_type type=%s matched=%d", type_, len(loans))
    return loans
