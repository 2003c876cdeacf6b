"""SQLAlchemy-backed reservation repository adapter."""

from sqlalchemy.orm import Session

from roadready.application.errors import ValidationError
from roadready.application.ports.reservation_repository import ReservationRepository
from roadready.domain.entities.reservation import Reservation

from .models import CarExtraModel, ReservationModel
from .sqlalchemy_repository import SqlAlchemyRepository, as_utc


class SqlAlchemyReservationRepository(
    SqlAlchemyRepository[Reservation, ReservationModel], ReservationRepository
):
    """SQLAlchemy implementation of reservation repository."""

    model = ReservationModel
    id_field = "reservation_id"
    resource_name = "Reservation"

    def _to_entity(self, model: ReservationModel) -> Reservation:
        return Reservation(
            reservation_id=model.reservation_id,
            user_id=model.user_id,
            car_id=model.car_id,
            pickup_date=as_utc(model.pickup_date),
            dropoff_date=as_utc(model.dropoff_date),
            total_price=model.total_price,
            status=model.status,
            extra_ids=sorted(extra.extra_id for extra in model.extras),
        )

    def _apply(self, entity: Reservation, model: ReservationModel, db: Session) -> None:
        model.user_id = entity.user_id
        model.car_id = entity.car_id
        model.pickup_date = entity.pickup_date
        model.dropoff_date = entity.dropoff_date
        model.total_price = entity.total_price
        model.status = entity.status
        model.extras = self._load_extras(db, entity.extra_ids)

    def _load_extras(self, db: Session, extra_ids: list[int]) -> list[CarExtraModel]:
        if not extra_ids:
            return []
        extras = db.query(CarExtraModel).filter(CarExtraModel.extra_id.in_(extra_ids)).all()
        missing = sorted(set(extra_ids) - {extra.extra_id for extra in extras})
        if missing:
            raise ValidationError(f"Car extras not found: {missing}")
        return extras
