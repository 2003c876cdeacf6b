"""Review mappings."""

from dataclasses import replace

from roadready.application.dtos.review import ReviewDTO
from roadready.application.mappers.base import EntityMapper
from roadready.domain.entities.review import Review


def review_to_dto(review: Review) -> ReviewDTO:
    return ReviewDTO(
        review_id=review.review_id,
        car_id=review.car_id,
        user_id=review.user_id,
        rating=review.rating,
        comment=review.comment,
        review_date=review.review_date,
    )


def review_from_dto(dto: ReviewDTO) -> Review:
    return Review(
        review_id=dto.review_id,
        car_id=dto.car_id,
        user_id=dto.user_id,
        rating=dto.rating,
        comment=dto.comment,
        review_date=dto.review_date,
    )


def merge_review(dto: ReviewDTO, review: Review) -> Review:
    # Reviews are addressed by car, so the payload usually carries no review id
    return replace(
        review_from_dto(dto),
        review_id=review.review_id,
        review_date=dto.review_date or review.review_date,
    )


review_mapper: EntityMapper[Review, ReviewDTO] = EntityMapper(
    to_dto=review_to_dto,
    to_entity=review_from_dto,
    merge=merge_review,
    dto_id=lambda dto: dto.review_id,
)
