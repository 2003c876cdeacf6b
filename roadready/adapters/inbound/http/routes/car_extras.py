"""Car extra routes."""

from fastapi import APIRouter, Depends, Request, Response, status

from roadready.adapters.inbound.http.auth import Principal, require_roles
from roadready.application.dtos.car_extra import CarExtraDTO
from roadready.application.dtos.message import MessageResponse
from roadready.application.use_cases.crud_use_case import CrudUseCase
from roadready.domain.roles import ADMIN, AGENT, CUSTOMER
from roadready.infrastructure.logging.logger import log_request
from roadready.infrastructure.wiring.dependencies import get_car_extra_use_case

router = APIRouter(prefix="/api/carextras", tags=["Car Extras"])


@router.get("", response_model=list[CarExtraDTO])
async def get_all_car_extras(
    _: Principal = Depends(require_roles(ADMIN, AGENT, CUSTOMER)),
    use_case: CrudUseCase = Depends(get_car_extra_use_case),
) -> list[CarExtraDTO]:
    return await use_case.list_all()


@router.get("/{extra_id}", response_model=CarExtraDTO)
async def get_car_extra_by_id(
    extra_id: int,
    _: Principal = Depends(require_roles(ADMIN, AGENT, CUSTOMER)),
    use_case: CrudUseCase = Depends(get_car_extra_use_case),
) -> CarExtraDTO:
    return await use_case.get(extra_id)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CarExtraDTO)
async def add_car_extra(
    extra: CarExtraDTO,
    request: Request,
    response: Response,
    _: Principal = Depends(require_roles(ADMIN)),
    use_case: CrudUseCase = Depends(get_car_extra_use_case),
) -> CarExtraDTO:
    created = await use_case.create(extra)
    response.headers["Location"] = str(
        request.url_for("get_car_extra_by_id", extra_id=created.extra_id)
    )
    log_request("car_extras", "create", extra_id=created.extra_id)
    return created


@router.put("/{extra_id}", response_model=MessageResponse)
async def update_car_extra(
    extra_id: int,
    extra: CarExtraDTO,
    _: Principal = Depends(require_roles(ADMIN)),
    use_case: CrudUseCase = Depends(get_car_extra_use_case),
) -> MessageResponse:
    await use_case.update(extra_id, extra)
    log_request("car_extras", "update", extra_id=extra_id)
    return MessageResponse(message=f"ID {extra_id} has been updated.")


@router.delete("/{extra_id}", response_model=MessageResponse)
async def delete_car_extra(
    extra_id: int,
    _: Principal = Depends(require_roles(ADMIN)),
    use_case: CrudUseCase = Depends(get_car_extra_use_case),
) -> MessageResponse:
    await use_case.delete(extra_id)
    log_request("car_extras", "delete", extra_id=extra_id)
    return MessageResponse(message=f"ID {extra_id} has been deleted.")
