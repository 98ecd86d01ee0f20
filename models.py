# models.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class MovementType(str, Enum):
    IN = "IN"
    OUT = "OUT"


@dataclass(eq=False)
class Supplier:
    name: str
    contact: str = ""

    def __str__(self) -> str:
        return f"{self.name} [{self.contact}]"


@dataclass(eq=False)
class Product:
    code: str
    name: str
    supplier: Optional[Supplier] = None  # preferred supplier
    quantity: int = 0

    def __str__(self) -> str:
        return f"{self.code} - {self.name} ({self.quantity})"


@dataclass(frozen=True, eq=False)
class StockMovement:
    product: Product
    amount: int
    kind: MovementType
    ts: datetime
    supplier: Optional[Supplier] = None  # IN only
    note: str = ""

    @property
    def signed_amount(self) -> int:
        return self.amount if self.kind is MovementType.IN else -self.amount
