"""Payment routes."""

from fastapi import APIRouter, Depends, Request, Response, status

from roadready.adapters.inbound.http.auth import Principal, require_roles
from roadready.application.dtos.message import MessageResponse
from roadready.application.dtos.payment import PaymentDTO
from roadready.application.use_cases.crud_use_case import CrudUseCase
from roadready.domain.roles import ADMIN, AGENT, CUSTOMER
from roadready.infrastructure.logging.logger import log_request
from roadready.infrastructure.wiring.dependencies import get_payment_use_case

router = APIRouter(prefix="/api/payments", tags=["Payments"])


@router.get("", response_model=list[PaymentDTO])
async def get_all_payments(
    _: Principal = Depends(require_roles(ADMIN, AGENT, CUSTOMER)),
    use_case: CrudUseCase = Depends(get_payment_use_case),
) -> list[PaymentDTO]:
    """List every payment; 404 when there are none."""
    return await use_case.list_all()


@router.get("/{payment_id}", response_model=PaymentDTO)
async def get_payment_by_id(
    payment_id: int,
    _: Principal = Depends(require_roles(ADMIN, AGENT, CUSTOMER)),
    use_case: CrudUseCase = Depends(get_payment_use_case),
) -> PaymentDTO:
    return await use_case.get(payment_id)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=PaymentDTO)
async def add_payment(
    payment: PaymentDTO,
    request: Request,
    response: Response,
    _: Principal = Depends(require_roles(CUSTOMER)),
    use_case: CrudUseCase = Depends(get_payment_use_case),
) -> PaymentDTO:
    """
    Record a payment.

    Returns:
        The stored payment, with a Location header pointing at it
    """
    created = await use_case.create(payment)
    response.headers["Location"] = str(
        request.url_for("get_payment_by_id", payment_id=created.payment_id)
    )
    log_request("payments", "create", payment_id=created.payment_id)
    return created


@router.put("/{payment_id}", response_model=MessageResponse)
async def update_payment(
    payment_id: int,
    payment: PaymentDTO,
    _: Principal = Depends(require_roles(ADMIN, CUSTOMER)),
    use_case: CrudUseCase = Depends(get_payment_use_case),
) -> MessageResponse:
    await use_case.update(payment_id, payment)
    log_request("payments", "update", payment_id=payment_id)
    return MessageResponse(message=f"ID {payment_id} has been updated.")


@router.delete("/{payment_id}", response_model=MessageResponse)
async def delete_payment(
    payment_id: int,
    _: Principal = Depends(require_roles(ADMIN, CUSTOMER)),
    use_case: CrudUseCase = Depends(get_payment_use_case),
) -> MessageResponse:
    await use_case.delete(payment_id)
    log_request("payments", "delete", payment_id=payment_id)
    return MessageResponse(message=f"ID {payment_id} has been deleted.")
