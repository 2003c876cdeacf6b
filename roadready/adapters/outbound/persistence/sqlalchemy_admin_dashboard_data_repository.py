"""SQLAlchemy-backed admin dashboard data repository adapter."""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from roadready.application.ports.admin_dashboard_data_repository import (
    AdminDashboardDataRepository,
)
from roadready.domain.entities.admin_dashboard_data import AdminDashboardData

from .models import (
    AdminDashboardDataModel,
    CarModel,
    PaymentModel,
    ReservationModel,
    ReviewModel,
    UserModel,
)
from .sqlalchemy_repository import SqlAlchemyRepository, as_utc


class SqlAlchemyAdminDashboardDataRepository(
    SqlAlchemyRepository[AdminDashboardData, AdminDashboardDataModel],
    AdminDashboardDataRepository,
):
    """SQLAlchemy implementation of admin dashboard data repository."""

    model = AdminDashboardDataModel
    id_field = "dashboard_id"
    resource_name = "Dashboard data"

    def _to_entity(self, model: AdminDashboardDataModel) -> AdminDashboardData:
        return AdminDashboardData(
            dashboard_id=model.dashboard_id,
            total_reservations=model.total_reservations,
            total_revenue=model.total_revenue,
            total_users=model.total_users,
            total_cars=model.total_cars,
            total_reviews=model.total_reviews,
            created_at=as_utc(model.created_at),
        )

    def _apply(
        self, entity: AdminDashboardData, model: AdminDashboardDataModel, db: Session
    ) -> None:
        model.total_reservations = entity.total_reservations
        model.total_revenue = entity.total_revenue
        model.total_users = entity.total_users
        model.total_cars = entity.total_cars
        model.total_reviews = entity.total_reviews
        if entity.created_at is not None:
            model.created_at = entity.created_at

    async def compute_live_totals(self) -> AdminDashboardData:
        """
        Aggregate current platform totals in a single query.

        Returns:
            Unsaved AdminDashboardData stamped with the current time
        """

        def count(model):
            return select(func.count()).select_from(model).scalar_subquery()

        statement = select(
            count(ReservationModel),
            count(UserModel),
            count(CarModel),
            count(ReviewModel),
            select(func.coalesce(func.sum(PaymentModel.amount), 0)).scalar_subquery(),
        )

        db = self._session()
        try:
            reservations, users, cars, reviews, revenue = db.execute(statement).one()
            return AdminDashboardData(
                total_reservations=reservations,
                total_users=users,
                total_cars=cars,
                total_reviews=reviews,
                total_revenue=Decimal(str(revenue)).quantize(Decimal("0.01")),
                created_at=datetime.now(timezone.utc),
            )
        except SQLAlchemyError as e:
            self._log_error("compute_live_totals", e)
            raise
        finally:
            db.close()
