"""SQLAlchemy ORM models."""

from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


reservation_car_extras = Table(
    "reservation_car_extras",
    Base.metadata,
    Column("reservation_id", Integer, ForeignKey("reservations.reservation_id"), primary_key=True),
    Column("extra_id", Integer, ForeignKey("car_extras.extra_id"), primary_key=True),
)


class UserModel(Base):
    """SQLAlchemy model for users table."""

    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    phone_number = Column(String(30), nullable=True)
    role = Column(String(20), nullable=False, default="Customer")
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class CarModel(Base):
    """SQLAlchemy model for cars table."""

    __tablename__ = "cars"

    car_id = Column(Integer, primary_key=True, autoincrement=True)
    make = Column(String(50), nullable=False, index=True)
    model = Column(String(50), nullable=False)
    year = Column(Integer, nullable=False)
    color = Column(String(30), nullable=True)
    location = Column(String(100), nullable=True)
    price_per_day = Column(Numeric(10, 2), nullable=False)
    availability_status = Column(Boolean, nullable=False, default=True)
    image_url = Column(String(500), nullable=True)


class CarExtraModel(Base):
    """SQLAlchemy model for car_extras table."""

    __tablename__ = "car_extras"

    extra_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=True)


class ReservationModel(Base):
    """SQLAlchemy model for reservations table."""

    __tablename__ = "reservations"

    reservation_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False, index=True)
    car_id = Column(Integer, ForeignKey("cars.car_id"), nullable=False, index=True)
    pickup_date = Column(DateTime(timezone=True), nullable=False)
    dropoff_date = Column(DateTime(timezone=True), nullable=False)
    total_price = Column(Numeric(10, 2), nullable=False)
    status = Column(String(20), nullable=False, default="Pending")

    # Only the reservation side is mapped; deleting a user, car or extra never
    # rewrites dependent rows, the database foreign keys decide instead
    extras = relationship("CarExtraModel", secondary=reservation_car_extras)


class PaymentModel(Base):
    """SQLAlchemy model for payments table."""

    __tablename__ = "payments"

    payment_id = Column(Integer, primary_key=True, autoincrement=True)
    reservation_id = Column(
        Integer, ForeignKey("reservations.reservation_id"), nullable=False, index=True
    )
    amount = Column(Numeric(10, 2), nullable=False)
    payment_date = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    payment_method = Column(String(30), nullable=True)
    payment_status = Column(String(20), nullable=False, default="Pending")


class ReviewModel(Base):
    """SQLAlchemy model for reviews table."""

    __tablename__ = "reviews"

    review_id = Column(Integer, primary_key=True, autoincrement=True)
    car_id = Column(Integer, ForeignKey("cars.car_id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=True)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    review_date = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class AdminDashboardDataModel(Base):
    """SQLAlchemy model for admin_dashboard_data table."""

    __tablename__ = "admin_dashboard_data"

    dashboard_id = Column(Integer, primary_key=True, autoincrement=True)
    total_reservations = Column(Integer, nullable=False, default=0)
    total_revenue = Column(Numeric(12, 2), nullable=False, default=0)
    total_users = Column(Integer, nullable=False, default=0)
    total_cars = Column(Integer, nullable=False, default=0)
    total_reviews = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
