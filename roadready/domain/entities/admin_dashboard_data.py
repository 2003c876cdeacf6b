"""Admin dashboard data entity."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class AdminDashboardData:
    """A snapshot of platform-wide totals shown on the admin dashboard."""

    total_reservations: int = 0
    total_revenue: Decimal = Decimal("0")
    total_users: int = 0
    total_cars: int = 0
    total_reviews: int = 0
    created_at: Optional[datetime] = None
    dashboard_id: Optional[int] = None
