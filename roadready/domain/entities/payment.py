"""Payment entity."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Payment:
    """A payment made against a reservation."""

    reservation_id: int
    amount: Decimal
    payment_date: Optional[datetime] = None
    payment_method: Optional[str] = None
    payment_status: str = "Pending"
    payment_id: Optional[int] = None
