"""Reservation entity."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Reservation:
    """A booking of a car by a user for a date range."""

    user_id: int
    car_id: int
    pickup_date: datetime
    dropoff_date: datetime
    total_price: Decimal
    status: str = "Pending"
    extra_ids: list[int] = field(default_factory=list)  # CarExtra identifiers
    reservation_id: Optional[int] = None
