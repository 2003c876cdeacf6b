"""User entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """A registered user of the rental platform."""

    first_name: str
    last_name: str
    email: str
    phone_number: Optional[str] = None
    role: str = "Customer"  # Admin, Agent or Customer
    created_at: Optional[datetime] = None
    user_id: Optional[int] = None
