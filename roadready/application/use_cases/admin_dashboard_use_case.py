"""Admin dashboard use case."""

from roadready.application.dtos.admin_dashboard import AdminDashboardDataDTO
from roadready.application.mappers.admin_dashboard_mapper import admin_dashboard_mapper
from roadready.application.ports.admin_dashboard_data_repository import (
    AdminDashboardDataRepository,
)
from roadready.application.use_cases.crud_use_case import CrudUseCase
from roadready.domain.entities.admin_dashboard_data import AdminDashboardData


class AdminDashboardUseCase(CrudUseCase[AdminDashboardData, AdminDashboardDataDTO]):
    """Stored dashboard snapshots plus on-demand live totals."""

    def __init__(self, repository: AdminDashboardDataRepository) -> None:
        super().__init__(repository, admin_dashboard_mapper, "Dashboard data", "dashboard data")
        self._dashboards = repository

    async def live_totals(self) -> AdminDashboardDataDTO:
        """Aggregate the current platform totals without storing them."""
        return admin_dashboard_mapper.to_dto(await self._dashboards.compute_live_totals())
