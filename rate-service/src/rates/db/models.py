# rate-service/src/rates/db/models.py
from dataclasses import dataclass
from typing import Optional, Union

from sqlalchemy import CheckConstraint, Column, Float, Integer, String, Table

from .session import metadata

TYPE_LENGTH = 32

rate_table = Table(
    "rate",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("type", String(TYPE_LENGTH), unique=True, nullable=False),
    Column("rate_value", Float, nullable=False),
    CheckConstraint("rate_value >= 0", name="ck_rate_value_non_negative"),
    CheckConstraint("type <> ''", name="ck_rate_type_not_empty"),
)


@dataclass(frozen=True)
class Rate:
    id: Optional[int]
    type: str
    rate_value: float

    def __post_init__(self):
        if not self.type:
            raise ValueError("Rate type must not be empty")
        if not self.rate_value >= 0:  # also rejects NaN
            raise ValueError(f"Rate value must be >= 0, got {self.rate_value}")

    @classmethod
    def from_row(cls, row) -> "Rate":
        return cls(id=row.id, type=row.type, rate_value=float(row.rate_value))

    def to_values(self) -> dict:
        values = {"type": self.type, "rate_value": self.rate_value}
        if self.id is not None:
            values["id"] = self.id
        return values


# Result of a lookup by type at the persistence boundary
@dataclass(frozen=True)
class Found:
    rate: Rate


@dataclass(frozen=True)
class NotFound:
    type: str


RateLookup = Union[Found, NotFound]
