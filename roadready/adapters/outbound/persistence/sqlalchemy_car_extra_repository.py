"""SQLAlchemy-backed car extra repository adapter."""

from sqlalchemy.orm import Session

from roadready.application.ports.car_extra_repository import CarExtraRepository
from roadready.domain.entities.car_extra import CarExtra

from .models import CarExtraModel
from .sqlalchemy_repository import SqlAlchemyRepository


class SqlAlchemyCarExtraRepository(
    SqlAlchemyRepository[CarExtra, CarExtraModel], CarExtraRepository
):
    """SQLAlchemy implementation of car extra repository."""

    model = CarExtraModel
    id_field = "extra_id"
    resource_name = "Car extra"

    def _to_entity(self, model: CarExtraModel) -> CarExtra:
        return CarExtra(
            extra_id=model.extra_id,
            name=model.name,
            description=model.description,
            price=model.price,
        )

    def _apply(self, entity: CarExtra, model: CarExtraModel, db: Session) -> None:
        model.name = entity.name
        model.description = entity.description
        model.price = entity.price
