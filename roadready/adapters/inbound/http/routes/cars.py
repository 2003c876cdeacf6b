"""Car routes."""

from fastapi import APIRouter, Depends, Request, Response, status

from roadready.adapters.inbound.http.auth import Principal, require_roles
from roadready.application.dtos.car import CarDTO
from roadready.application.dtos.message import MessageResponse
from roadready.application.use_cases.crud_use_case import CrudUseCase
from roadready.domain.roles import ADMIN, AGENT, CUSTOMER
from roadready.infrastructure.logging.logger import log_request
from roadready.infrastructure.wiring.dependencies import get_car_use_case

router = APIRouter(prefix="/api/cars", tags=["Cars"])


@router.get("", response_model=list[CarDTO])
async def get_all_cars(
    _: Principal = Depends(require_roles(ADMIN, AGENT, CUSTOMER)),
    use_case: CrudUseCase = Depends(get_car_use_case),
) -> list[CarDTO]:
    return await use_case.list_all()


@router.get("/{car_id}", response_model=CarDTO)
async def get_car_by_id(
    car_id: int,
    _: Principal = Depends(require_roles(ADMIN, AGENT, CUSTOMER)),
    use_case: CrudUseCase = Depends(get_car_use_case),
) -> CarDTO:
    return await use_case.get(car_id)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CarDTO)
async def add_car(
    car: CarDTO,
    request: Request,
    response: Response,
    _: Principal = Depends(require_roles(ADMIN, AGENT)),
    use_case: CrudUseCase = Depends(get_car_use_case),
) -> CarDTO:
    created = await use_case.create(car)
    response.headers["Location"] = str(request.url_for("get_car_by_id", car_id=created.car_id))
    log_request("cars", "create", car_id=created.car_id)
    return created


@router.put("/{car_id}", response_model=MessageResponse)
async def update_car(
    car_id: int,
    car: CarDTO,
    _: Principal = Depends(require_roles(ADMIN, AGENT)),
    use_case: CrudUseCase = Depends(get_car_use_case),
) -> MessageResponse:
    await use_case.update(car_id, car)
    log_request("cars", "update", car_id=car_id)
    return MessageResponse(message=f"Car with ID {car_id} has been updated.")


@router.delete("/{car_id}", response_model=MessageResponse)
async def delete_car(
    car_id: int,
    _: Principal = Depends(require_roles(ADMIN, AGENT)),
    use_case: CrudUseCase = Depends(get_car_use_case),
) -> MessageResponse:
    await use_case.delete(car_id)
    log_request("cars", "delete", car_id=car_id)
    return MessageResponse(message=f"Car with ID {car_id} has been deleted.")
