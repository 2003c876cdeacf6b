"""Admin dashboard data repository port."""

from abc import abstractmethod

from roadready.application.ports.repository import Repository
from roadready.domain.entities.admin_dashboard_data import AdminDashboardData


class AdminDashboardDataRepository(Repository[AdminDashboardData]):
    """Port interface for admin dashboard data repository."""

    @abstractmethod
    async def compute_live_totals(self) -> AdminDashboardData:
        """
        Aggregate the current platform totals without storing them.

        Returns:
            Unsaved AdminDashboardData with counts of reservations, users,
            cars and reviews and the sum of payment amounts
        """
        pass
