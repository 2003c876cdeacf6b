"""SQLAlchemy-backed car repository adapter."""

from sqlalchemy.orm import Session

from roadready.application.ports.car_repository import CarRepository
from roadready.domain.entities.car import Car

from .models import CarModel
from .sqlalchemy_repository import SqlAlchemyRepository


class SqlAlchemyCarRepository(SqlAlchemyRepository[Car, CarModel], CarRepository):
    """SQLAlchemy implementation of car repository."""

    model = CarModel
    id_field = "car_id"
    resource_name = "Car"

    def _to_entity(self, model: CarModel) -> Car:
        return Car(
            car_id=model.car_id,
            make=model.make,
            model=model.model,
            year=model.year,
            color=model.color,
            location=model.location,
            price_per_day=model.price_per_day,
            availability_status=model.availability_status,
            image_url=model.image_url,
        )

    def _apply(self, entity: Car, model: CarModel, db: Session) -> None:
        model.make = entity.make
        model.model = entity.model
        model.year = entity.year
        model.color = entity.color
        model.location = entity.location
        model.price_per_day = entity.price_per_day
        model.availability_status = entity.availability_status
        model.image_url = entity.image_url
