"""SQLAlchemy-backed review repository adapter."""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from roadready.application.ports.review_repository import ReviewRepository
from roadready.domain.entities.review import Review

from .models import ReviewModel
from .sqlalchemy_repository import SqlAlchemyRepository, as_utc


class SqlAlchemyReviewRepository(SqlAlchemyRepository[Review, ReviewModel], ReviewRepository):
    """SQLAlchemy implementation of review repository."""

    model = ReviewModel
    id_field = "review_id"
    resource_name = "Review"

    def _to_entity(self, model: ReviewModel) -> Review:
        return Review(
            review_id=model.review_id,
            car_id=model.car_id,
            user_id=model.user_id,
            rating=model.rating,
            comment=model.comment,
            review_date=as_utc(model.review_date),
        )

    def _apply(self, entity: Review, model: ReviewModel, db: Session) -> None:
        model.car_id = entity.car_id
        model.user_id = entity.user_id
        model.rating = entity.rating
        model.comment = entity.comment
        if entity.review_date is not None:
            model.review_date = entity.review_date

    async def get_by_car_id(self, car_id: int) -> Optional[Review]:
        """
        Get the first review for a car.

        Args:
            car_id: Car identifier

        Returns:
            Review entity, or None if the car has no review
        """
        db = self._session()
        try:
            model = (
                db.query(ReviewModel)
                .filter(ReviewModel.car_id == car_id)
                .order_by(ReviewModel.review_id)
                .first()
            )
            if model is None:
                return None
            return self._to_entity(model)
        except SQLAlchemyError as e:
            self._log_error("get_by_car_id", e, car_id=car_id)
            raise
        finally:
            db.close()
