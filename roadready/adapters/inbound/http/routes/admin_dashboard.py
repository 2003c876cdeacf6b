"""Admin dashboard routes."""

from fastapi import APIRouter, Depends, Request, Response, status

from roadready.adapters.inbound.http.auth import Principal, require_roles
from roadready.application.dtos.admin_dashboard import AdminDashboardDataDTO
from roadready.application.dtos.message import MessageResponse
from roadready.application.use_cases.admin_dashboard_use_case import AdminDashboardUseCase
from roadready.domain.roles import ADMIN
from roadready.infrastructure.logging.logger import log_request
from roadready.infrastructure.wiring.dependencies import get_admin_dashboard_use_case

router = APIRouter(
    prefix="/api/admindashboarddata",
    tags=["Admin Dashboard"],
    dependencies=[Depends(require_roles(ADMIN))],
)


@router.get("", response_model=list[AdminDashboardDataDTO])
async def get_all_admin_dashboard_data(
    use_case: AdminDashboardUseCase = Depends(get_admin_dashboard_use_case),
) -> list[AdminDashboardDataDTO]:
    return await use_case.list_all()


# Declared before /{dashboard_id} so "live" is not parsed as an identifier
@router.get("/live", response_model=AdminDashboardDataDTO)
async def get_live_dashboard_data(
    use_case: AdminDashboardUseCase = Depends(get_admin_dashboard_use_case),
) -> AdminDashboardDataDTO:
    """Compute current totals across reservations, users, cars, reviews and payments."""
    return await use_case.live_totals()


@router.get("/{dashboard_id}", response_model=AdminDashboardDataDTO)
async def get_dashboard_data_by_id(
    dashboard_id: int,
    use_case: AdminDashboardUseCase = Depends(get_admin_dashboard_use_case),
) -> AdminDashboardDataDTO:
    return await use_case.get(dashboard_id)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=AdminDashboardDataDTO)
async def add_dashboard_data(
    data: AdminDashboardDataDTO,
    request: Request,
    response: Response,
    use_case: AdminDashboardUseCase = Depends(get_admin_dashboard_use_case),
) -> AdminDashboardDataDTO:
    """Store a dashboard snapshot; 409 if its identifier is already taken."""
    created = await use_case.create(data)
    response.headers["Location"] = str(
        request.url_for("get_dashboard_data_by_id", dashboard_id=created.dashboard_id)
    )
    log_request("admin_dashboard", "create", dashboard_id=created.dashboard_id)
    return created


@router.put("/{dashboard_id}", response_model=MessageResponse)
async def update_dashboard_data(
    dashboard_id: int,
    data: AdminDashboardDataDTO,
    use_case: AdminDashboardUseCase = Depends(get_admin_dashboard_use_case),
) -> MessageResponse:
    await use_case.update(dashboard_id, data)
    log_request("admin_dashboard", "update", dashboard_id=dashboard_id)
    return MessageResponse(message=f"ID {dashboard_id} has been updated.")


@router.delete("/{dashboard_id}", response_model=MessageResponse)
async def delete_dashboard_data(
    dashboard_id: int,
    use_case: AdminDashboardUseCase = Depends(get_admin_dashboard_use_case),
) -> MessageResponse:
    await use_case.delete(dashboard_id)
    log_request("admin_dashboard", "delete", dashboard_id=dashboard_id)
    return MessageResponse(message=f"ID {dashboard_id} has been deleted.")
