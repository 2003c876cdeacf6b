"""SQLAlchemy-backed user repository adapter."""

from sqlalchemy.orm import Session

from roadready.application.ports.user_repository import UserRepository
from roadready.domain.entities.user import User

from .models import UserModel
from .sqlalchemy_repository import SqlAlchemyRepository, as_utc


class SqlAlchemyUserRepository(SqlAlchemyRepository[User, UserModel], UserRepository):
    """SQLAlchemy implementation of user repository."""

    model = UserModel
    id_field = "user_id"
    resource_name = "User"

    def _to_entity(self, model: UserModel) -> User:
        return User(
            user_id=model.user_id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            phone_number=model.phone_number,
            role=model.role,
            created_at=as_utc(model.created_at),
        )

    def _apply(self, entity: User, model: UserModel, db: Session) -> None:
        model.first_name = entity.first_name
        model.last_name = entity.last_name
        model.email = entity.email
        model.phone_number = entity.phone_number
        model.role = entity.role
        if entity.created_at is not None:
            model.created_at = entity.created_at
