"""Review use case: reviews are addressed by the car they belong to."""

from roadready.application.dtos.review import ReviewDTO
from roadready.application.errors import NotFoundError, ValidationError
from roadready.application.mappers.review_mapper import review_mapper
from roadready.application.ports.review_repository import ReviewRepository
from roadready.application.use_cases.crud_use_case import CrudUseCase
from roadready.domain.entities.review import Review


class ReviewUseCase(CrudUseCase[Review, ReviewDTO]):
    """Review operations keyed by car identifier."""

    def __init__(self, repository: ReviewRepository) -> None:
        super().__init__(repository, review_mapper, "Review", "reviews")
        self._reviews = repository

    async def create(self, dto: ReviewDTO) -> ReviewDTO:
        if dto.car_id <= 0:
            raise ValidationError("A valid CarId is required to add a review.")
        return await super().create(dto)

    async def get_by_car(self, car_id: int) -> ReviewDTO:
        """
        Fetch the review for a car.

        Raises:
            NotFoundError: If the car has no review
        """
        review = await self._reviews.get_by_car_id(car_id)
        if review is None:
            raise NotFoundError(f"Review for Car ID {car_id} not found.")
        return review_mapper.to_dto(review)

    async def update_by_car(self, car_id: int, dto: ReviewDTO) -> None:
        """
        Replace the review for a car.

        Raises:
            ValidationError: If the payload's carId differs from the path
            NotFoundError: If the car has no review
        """
        if dto.car_id != car_id:
            raise ValidationError("Car ID mismatch.")

        existing = await self._reviews.get_by_car_id(car_id)
        if existing is None:
            raise NotFoundError(f"Review for Car ID {car_id} not found.")

        await self._reviews.update(review_mapper.merge(dto, existing))
