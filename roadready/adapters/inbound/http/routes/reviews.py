"""Review routes."""

from fastapi import APIRouter, Depends, Request, Response, status

from roadready.adapters.inbound.http.auth import Principal, require_roles
from roadready.application.dtos.message import MessageResponse
from roadready.application.dtos.review import ReviewDTO
from roadready.application.use_cases.review_use_case import ReviewUseCase
from roadready.domain.roles import ADMIN, AGENT, CUSTOMER
from roadready.infrastructure.logging.logger import log_request
from roadready.infrastructure.wiring.dependencies import get_review_use_case

router = APIRouter(prefix="/api/reviews", tags=["Reviews"])


@router.get("", response_model=list[ReviewDTO])
async def get_all_reviews(
    _: Principal = Depends(require_roles(ADMIN, CUSTOMER, AGENT)),
    use_case: ReviewUseCase = Depends(get_review_use_case),
) -> list[ReviewDTO]:
    return await use_case.list_all()


@router.get("/ByCar/{car_id}", response_model=ReviewDTO)
async def get_review_by_car_id(
    car_id: int,
    _: Principal = Depends(require_roles(ADMIN, CUSTOMER, AGENT)),
    use_case: ReviewUseCase = Depends(get_review_use_case),
) -> ReviewDTO:
    return await use_case.get_by_car(car_id)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ReviewDTO)
async def add_review(
    review: ReviewDTO,
    request: Request,
    response: Response,
    _: Principal = Depends(require_roles(CUSTOMER)),
    use_case: ReviewUseCase = Depends(get_review_use_case),
) -> ReviewDTO:
    """Add a review; the Location header points at the car's review."""
    created = await use_case.create(review)
    response.headers["Location"] = str(
        request.url_for("get_review_by_car_id", car_id=created.car_id)
    )
    log_request("reviews", "create", review_id=created.review_id, car_id=created.car_id)
    return created


@router.put("/ByCar/{car_id}", response_model=MessageResponse)
async def update_review(
    car_id: int,
    review: ReviewDTO,
    _: Principal = Depends(require_roles(ADMIN, CUSTOMER)),
    use_case: ReviewUseCase = Depends(get_review_use_case),
) -> MessageResponse:
    await use_case.update_by_car(car_id, review)
    log_request("reviews", "update", car_id=car_id)
    return MessageResponse(message=f"Review for Car ID {car_id} has been updated.")
