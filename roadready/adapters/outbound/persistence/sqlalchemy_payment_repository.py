"""SQLAlchemy-backed payment repository adapter."""

from sqlalchemy.orm import Session

from roadready.application.ports.payment_repository import PaymentRepository
from roadready.domain.entities.payment import Payment

from .models import PaymentModel
from .sqlalchemy_repository import SqlAlchemyRepository, as_utc


class SqlAlchemyPaymentRepository(
    SqlAlchemyRepository[Payment, PaymentModel], PaymentRepository
):
    """SQLAlchemy implementation of payment repository."""

    model = PaymentModel
    id_field = "payment_id"
    resource_name = "Payment"

    def _to_entity(self, model: PaymentModel) -> Payment:
        return Payment(
            payment_id=model.payment_id,
            reservation_id=model.reservation_id,
            amount=model.amount,
            payment_date=as_utc(model.payment_date),
            payment_method=model.payment_method,
            payment_status=model.payment_status,
        )

    def _apply(self, entity: Payment, model: PaymentModel, db: Session) -> None:
        model.reservation_id = entity.reservation_id
        model.amount = entity.amount
        model.payment_method = entity.payment_method
        model.payment_status = entity.payment_status
        if entity.payment_date is not None:
            model.payment_date = entity.payment_date
