"""Car entity."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Car:
    """A rentable car."""

    make: str
    model: str
    year: int
    price_per_day: Decimal
    color: Optional[str] = None
    location: Optional[str] = None
    availability_status: bool = True
    image_url: Optional[str] = None
    car_id: Optional[int] = None
