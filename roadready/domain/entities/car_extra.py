"""Car extra entity."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class CarExtra:
    """An optional add-on (GPS, child seat, ...) that can be attached to reservations."""

    name: str
    description: Optional[str] = None
    price: Optional[Decimal] = None
    extra_id: Optional[int] = None
