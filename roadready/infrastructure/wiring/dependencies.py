"""Dependency injection factory functions."""

from typing import Callable

from fastapi import Depends
from sqlalchemy.orm import Session

from roadready.adapters.outbound.persistence import (
    SqlAlchemyAdminDashboardDataRepository,
    SqlAlchemyCarExtraRepository,
    SqlAlchemyCarRepository,
    SqlAlchemyPaymentRepository,
    SqlAlchemyReservationRepository,
    SqlAlchemyReviewRepository,
    SqlAlchemyUserRepository,
)
from roadready.application.dtos.car import CarDTO
from roadready.application.dtos.car_extra import CarExtraDTO
from roadready.application.dtos.payment import PaymentDTO
from roadready.application.dtos.reservation import ReservationDTO
from roadready.application.dtos.user import UserDTO
from roadready.application.mappers.car_extra_mapper import car_extra_mapper
from roadready.application.mappers.car_mapper import car_mapper
from roadready.application.mappers.payment_mapper import payment_mapper
from roadready.application.mappers.reservation_mapper import reservation_mapper
from roadready.application.mappers.user_mapper import user_mapper
from roadready.application.ports.admin_dashboard_data_repository import (
    AdminDashboardDataRepository,
)
from roadready.application.ports.car_extra_repository import CarExtraRepository
from roadready.application.ports.car_repository import CarRepository
from roadready.application.ports.payment_repository import PaymentRepository
from roadready.application.ports.reservation_repository import ReservationRepository
from roadready.application.ports.review_repository import ReviewRepository
from roadready.application.ports.user_repository import UserRepository
from roadready.application.use_cases.admin_dashboard_use_case import AdminDashboardUseCase
from roadready.application.use_cases.crud_use_case import CrudUseCase
from roadready.application.use_cases.review_use_case import ReviewUseCase
from roadready.domain.entities.car import Car
from roadready.domain.entities.car_extra import CarExtra
from roadready.domain.entities.payment import Payment
from roadready.domain.entities.reservation import Reservation
from roadready.domain.entities.user import User
from roadready.infrastructure.db import get_db_session

SessionFactory = Callable[[], Session]


def get_session_factory() -> SessionFactory:
    """
    Provide the callable repositories use to open a session per operation.

    Returns:
        Session factory bound to the configured database
    """
    return get_db_session


def get_user_repository(
    session_factory: SessionFactory = Depends(get_session_factory),
) -> UserRepository:
    return SqlAlchemyUserRepository(session_factory)


def get_car_repository(
    session_factory: SessionFactory = Depends(get_session_factory),
) -> CarRepository:
    return SqlAlchemyCarRepository(session_factory)


def get_car_extra_repository(
    session_factory: SessionFactory = Depends(get_session_factory),
) -> CarExtraRepository:
    return SqlAlchemyCarExtraRepository(session_factory)


def get_reservation_repository(
    session_factory: SessionFactory = Depends(get_session_factory),
) -> ReservationRepository:
    return SqlAlchemyReservationRepository(session_factory)


def get_payment_repository(
    session_factory: SessionFactory = Depends(get_session_factory),
) -> PaymentRepository:
    return SqlAlchemyPaymentRepository(session_factory)


def get_review_repository(
    session_factory: SessionFactory = Depends(get_session_factory),
) -> ReviewRepository:
    return SqlAlchemyReviewRepository(session_factory)


def get_admin_dashboard_data_repository(
    session_factory: SessionFactory = Depends(get_session_factory),
) -> AdminDashboardDataRepository:
    return SqlAlchemyAdminDashboardDataRepository(session_factory)


def get_user_use_case(
    repository: UserRepository = Depends(get_user_repository),
) -> CrudUseCase[User, UserDTO]:
    return CrudUseCase(repository, user_mapper, "User", "users")


def get_car_use_case(
    repository: CarRepository = Depends(get_car_repository),
) -> CrudUseCase[Car, CarDTO]:
    return CrudUseCase(repository, car_mapper, "Car", "cars")


def get_car_extra_use_case(
    repository: CarExtraRepository = Depends(get_car_extra_repository),
) -> CrudUseCase[CarExtra, CarExtraDTO]:
    return CrudUseCase(repository, car_extra_mapper, "Car extra", "car extras")


def get_reservation_use_case(
    repository: ReservationRepository = Depends(get_reservation_repository),
) -> CrudUseCase[Reservation, ReservationDTO]:
    return CrudUseCase(repository, reservation_mapper, "Reservation", "reservations")


def get_payment_use_case(
    repository: PaymentRepository = Depends(get_payment_repository),
) -> CrudUseCase[Payment, PaymentDTO]:
    return CrudUseCase(repository, payment_mapper, "Payment", "payments")


def get_review_use_case(
    repository: ReviewRepository = Depends(get_review_repository),
) -> ReviewUseCase:
    return ReviewUseCase(repository)


def get_admin_dashboard_use_case(
    repository: AdminDashboardDataRepository = Depends(get_admin_dashboard_data_repository),
) -> AdminDashboardUseCase:
    return AdminDashboardUseCase(repository)
