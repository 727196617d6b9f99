# loan-service/src/loans/db/models.py
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import CheckConstraint, Column, Integer, String, Table

from .session import metadata

TYPE_LENGTH = 32

# Loans carry only their type; the same type may appear on many rows.
loan_table = Table(
    "loan",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("type", String(TYPE_LENGTH), nullable=False, index=True),
    CheckConstraint("type <> ''", name="ck_loan_type_not_empty"),
)


@dataclass(frozen=True)
class Loan:
    id: Optional[int]
    type: str

    def __post_init__(self):
        if not self.type:
            raise ValueError("Loan type must not be empty")

    @classmethod
    def from_row(cls, row) -> "Loan":
        return cls(id=row.id, type=row.type)
