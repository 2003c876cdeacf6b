"""Reservation routes."""

from fastapi import APIRouter, Depends, Request, Response, status

from roadready.adapters.inbound.http.auth import Principal, require_roles
from roadready.application.dtos.message import MessageResponse
from roadready.application.dtos.reservation import ReservationDTO
from roadready.application.use_cases.crud_use_case import CrudUseCase
from roadready.domain.roles import ADMIN, AGENT, CUSTOMER
from roadready.infrastructure.logging.logger import log_request
from roadready.infrastructure.wiring.dependencies import get_reservation_use_case

router = APIRouter(prefix="/api/reservations", tags=["Reservations"])


@router.get("", response_model=list[ReservationDTO])
async def get_all_reservations(
    _: Principal = Depends(require_roles(ADMIN, AGENT, CUSTOMER)),
    use_case: CrudUseCase = Depends(get_reservation_use_case),
) -> list[ReservationDTO]:
    return await use_case.list_all()


@router.get("/{reservation_id}", response_model=ReservationDTO)
async def get_reservation_by_id(
    reservation_id: int,
    _: Principal = Depends(require_roles(ADMIN, AGENT, CUSTOMER)),
    use_case: CrudUseCase = Depends(get_reservation_use_case),
) -> ReservationDTO:
    return await use_case.get(reservation_id)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ReservationDTO)
async def add_reservation(
    reservation: ReservationDTO,
    request: Request,
    response: Response,
    _: Principal = Depends(require_roles(ADMIN, CUSTOMER)),
    use_case: CrudUseCase = Depends(get_reservation_use_case),
) -> ReservationDTO:
    """
    Book a car.

    Extras are attached by identifier; unknown extras are rejected with 400.
    """
    created = await use_case.create(reservation)
    response.headers["Location"] = str(
        request.url_for("get_reservation_by_id", reservation_id=created.reservation_id)
    )
    log_request("reservations", "create", reservation_id=created.reservation_id)
    return created


@router.put("/{reservation_id}", response_model=MessageResponse)
async def update_reservation(
    reservation_id: int,
    reservation: ReservationDTO,
    _: Principal = Depends(require_roles(ADMIN, AGENT, CUSTOMER)),
    use_case: CrudUseCase = Depends(get_reservation_use_case),
) -> MessageResponse:
    await use_case.update(reservation_id, reservation)
    log_request("reservations", "update", reservation_id=reservation_id)
    return MessageResponse(message=f"ID {reservation_id} has been updated.")


@router.delete("/{reservation_id}", response_model=MessageResponse)
async def delete_reservation(
    reservation_id: int,
    _: Principal = Depends(require_roles(ADMIN, CUSTOMER)),
    use_case: CrudUseCase = Depends(get_reservation_use_case),
) -> MessageResponse:
    await use_case.delete(reservation_id)
    log_request("reservations", "delete", reservation_id=reservation_id)
    return MessageResponse(message=f"ID {reservation_id} has been deleted.")
