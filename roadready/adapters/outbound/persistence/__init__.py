"""SQLAlchemy persistence adapters."""

from roadready.adapters.outbound.persistence.sqlalchemy_admin_dashboard_data_repository import (
    SqlAlchemyAdminDashboardDataRepository,
)
from roadready.adapters.outbound.persistence.sqlalchemy_car_extra_repository import (
    SqlAlchemyCarExtraRepository,
)
from roadready.adapters.outbound.persistence.sqlalchemy_car_repository import (
    SqlAlchemyCarRepository,
)
from roadready.adapters.outbound.persistence.sqlalchemy_payment_repository import (
    SqlAlchemyPaymentRepository,
)
from roadready.adapters.outbound.persistence.sqlalchemy_reservation_repository import (
    SqlAlchemyReservationRepository,
)
from roadready.adapters.outbound.persistence.sqlalchemy_review_repository import (
    SqlAlchemyReviewRepository,
)
from roadready.adapters.outbound.persistence.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)

__all__ = [
    "SqlAlchemyAdminDashboardDataRepository",
    "SqlAlchemyCarExtraRepository",
    "SqlAlchemyCarRepository",
    "SqlAlchemyPaymentRepository",
    "SqlAlchemyReservationRepository",
    "SqlAlchemyReviewRepository",
    "SqlAlchemyUserRepository",
]
