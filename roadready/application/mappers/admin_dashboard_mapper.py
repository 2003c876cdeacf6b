"""Admin dashboard mappings."""

from dataclasses import replace

from roadready.application.dtos.admin_dashboard import AdminDashboardDataDTO
from roadready.application.mappers.base import EntityMapper
from roadready.domain.entities.admin_dashboard_data import AdminDashboardData


def dashboard_to_dto(data: AdminDashboardData) -> AdminDashboardDataDTO:
    return AdminDashboardDataDTO(
        dashboard_id=data.dashboard_id,
        total_reservations=data.total_reservations,
        total_revenue=data.total_revenue,
        total_users=data.total_users,
        total_cars=data.total_cars,
        total_reviews=data.total_reviews,
        created_at=data.created_at,
    )


def dashboard_from_dto(dto: AdminDashboardDataDTO) -> AdminDashboardData:
    return AdminDashboardData(
        dashboard_id=dto.dashboard_id,
        total_reservations=dto.total_reservations,
        total_revenue=dto.total_revenue,
        total_users=dto.total_users,
        total_cars=dto.total_cars,
        total_reviews=dto.total_reviews,
        created_at=dto.created_at,
    )


def merge_dashboard(dto: AdminDashboardDataDTO, data: AdminDashboardData) -> AdminDashboardData:
    return replace(
        dashboard_from_dto(dto),
        dashboard_id=data.dashboard_id,
        created_at=dto.created_at or data.created_at,
    )


admin_dashboard_mapper: EntityMapper[AdminDashboardData, AdminDashboardDataDTO] = EntityMapper(
    to_dto=dashboard_to_dto,
    to_entity=dashboard_from_dto,
    merge=merge_dashboard,
    dto_id=lambda dto: dto.dashboard_id,
)
