"""Domain entity — a money movement in or out."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


@dataclass
class Transaction:
    """A financial transaction. Amounts are expected positive; the sign is
    carried by ``type``."""

    user_id: int
    amount: float
    category: str
    date: datetime
    type: TransactionType | str
    description: str | None = None
    id: int | None = None
