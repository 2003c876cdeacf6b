"""Unit tests for SQLAlchemy repositories using SQLite in-memory."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from roadready.adapters.outbound.persistence import (
    SqlAlchemyAdminDashboardDataRepository,
    SqlAlchemyCarExtraRepository,
    SqlAlchemyCarRepository,
    SqlAlchemyPaymentRepository,
    SqlAlchemyReservationRepository,
    SqlAlchemyReviewRepository,
    SqlAlchemyUserRepository,
)
from roadready.adapters.outbound.persistence.sqlalchemy_repository import as_utc
from roadready.application.errors import (
    ConflictError,
    DuplicateResourceError,
    NotFoundError,
    ResourceInUseError,
    ValidationError,
)
from roadready.domain.entities.admin_dashboard_data import AdminDashboardData
from roadready.domain.entities.car import Car
from roadready.domain.entities.car_extra import CarExtra
from roadready.domain.entities.payment import Payment
from roadready.domain.entities.reservation import Reservation
from roadready.domain.entities.review import Review
from roadready.domain.entities.user import User

PAID_AT = datetime(2024, 6, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def payments(session_factory):
    return SqlAlchemyPaymentRepository(session_factory)


@pytest.fixture
def dashboards(session_factory):
    return SqlAlchemyAdminDashboardDataRepository(session_factory)


def _payment(**overrides) -> Payment:
    fields = {
        "reservation_id": 1,
        "amount": Decimal("180.50"),
        "payment_date": PAID_AT,
        "payment_method": "CreditCard",
        "payment_status": "Completed",
    }
    fields.update(overrides)
    return Payment(**fields)


@pytest.mark.asyncio
async def test_add_assigns_identifier(payments):
    payment = _payment()

    await payments.add(payment)

    assert payment.payment_id is not None
    assert (await payments.get_by_id(payment.payment_id)) == payment


@pytest.mark.asyncio
async def test_add_with_identifier_round_trip(payments):
    """get_by_id after add with a preset id returns an equal record."""
    payment = _payment(payment_id=42)

    await payments.add(payment)
    retrieved = await payments.get_by_id(42)

    assert retrieved == _payment(payment_id=42)


@pytest.mark.asyncio
async def test_add_duplicate_identifier_raises(payments):
    await payments.add(_payment(payment_id=7))

    with pytest.raises(DuplicateResourceError) as exc_info:
        await payments.add(_payment(payment_id=7, amount=Decimal("1.00")))

    # Raised from the insert itself, so concurrent inserts of one id also get a 409
    assert isinstance(exc_info.value.__cause__, IntegrityError)

    stored = await payments.get_by_id(7)
    assert stored.amount == Decimal("180.50")


@pytest.mark.asyncio
async def test_add_fills_default_payment_date(payments):
    payment = _payment(payment_date=None)

    await payments.add(payment)

    assert payment.payment_date is not None
    assert payment.payment_date.tzinfo is not None


@pytest.mark.asyncio
async def test_get_all_empty(payments):
    assert await payments.get_all() == []


@pytest.mark.asyncio
async def test_get_all_ordered_by_identifier(payments):
    await payments.add(_payment(payment_id=3))
    await payments.add(_payment(payment_id=1))
    await payments.add(_payment(payment_id=2))

    assert [p.payment_id for p in await payments.get_all()] == [1, 2, 3]


@pytest.mark.asyncio
async def test_get_by_id_missing_returns_none(payments):
    assert await payments.get_by_id(999) is None


@pytest.mark.asyncio
async def test_update_replaces_fields_and_is_idempotent(payments):
    payment = _payment()
    await payments.add(payment)
    changed = _payment(
        payment_id=payment.payment_id,
        amount=Decimal("99.99"),
        payment_status="Refunded",
        payment_method=None,
    )

    await payments.update(changed)
    once = await payments.get_by_id(payment.payment_id)
    await payments.update(changed)
    twice = await payments.get_by_id(payment.payment_id)

    assert once == twice == changed


@pytest.mark.asyncio
async def test_update_missing_row_raises_not_found(payments):
    with pytest.raises(NotFoundError):
        await payments.update(_payment(payment_id=404))


@pytest.mark.asyncio
async def test_delete_then_get_returns_none(payments):
    payment = _payment()
    await payments.add(payment)

    await payments.delete(payment.payment_id)

    assert await payments.get_by_id(payment.payment_id) is None


@pytest.mark.asyncio
async def test_delete_missing_row_is_noop(payments):
    await payments.delete(12345)
    assert await payments.get_all() == []


@pytest.mark.asyncio
async def test_user_round_trip(session_factory):
    users = SqlAlchemyUserRepository(session_factory)
    user = User(
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        phone_number="+441234567890",
        role="Admin",
    )

    await users.add(user)

    assert user.user_id is not None
    assert user.created_at is not None
    assert await users.get_by_id(user.user_id) == user


@pytest.mark.asyncio
async def test_car_round_trip(session_factory):
    cars = SqlAlchemyCarRepository(session_factory)
    car = Car(make="Toyota", model="Corolla", year=2022, price_per_day=Decimal("45.00"))

    await cars.add(car)

    stored = await cars.get_by_id(car.car_id)
    assert stored.make == "Toyota"
    assert stored.price_per_day == Decimal("45.00")
    assert stored.availability_status is True


@pytest.mark.asyncio
async def test_review_get_by_car_returns_first_review(session_factory):
    reviews = SqlAlchemyReviewRepository(session_factory)
    await reviews.add(Review(car_id=5, rating=4, comment="Smooth ride"))
    await reviews.add(Review(car_id=5, rating=2, comment="Late pickup"))
    await reviews.add(Review(car_id=6, rating=5))

    review = await reviews.get_by_car_id(5)

    assert review is not None
    assert review.comment == "Smooth ride"
    assert await reviews.get_by_car_id(99) is None


@pytest.mark.asyncio
async def test_reservation_extras_round_trip(session_factory):
    extras = SqlAlchemyCarExtraRepository(session_factory)
    reservations = SqlAlchemyReservationRepository(session_factory)
    gps = CarExtra(name="GPS", price=Decimal("5.00"))
    seat = CarExtra(name="Child seat", price=Decimal("7.50"))
    await extras.add(gps)
    await extras.add(seat)

    reservation = Reservation(
        user_id=1,
        car_id=1,
        pickup_date=datetime(2024, 6, 1, 10, tzinfo=timezone.utc),
        dropoff_date=datetime(2024, 6, 5, 10, tzinfo=timezone.utc),
        total_price=Decimal("192.50"),
        extra_ids=[seat.extra_id, gps.extra_id],
    )
    await reservations.add(reservation)

    stored = await reservations.get_by_id(reservation.reservation_id)
    assert stored.extra_ids == sorted([gps.extra_id, seat.extra_id])
    assert stored.pickup_date == reservation.pickup_date

    stored.extra_ids = [gps.extra_id]
    await reservations.update(stored)
    assert (await reservations.get_by_id(reservation.reservation_id)).extra_ids == [gps.extra_id]


@pytest.mark.asyncio
async def test_reservation_with_unknown_extra_is_rejected(session_factory):
    reservations = SqlAlchemyReservationRepository(session_factory)
    reservation = Reservation(
        user_id=1,
        car_id=1,
        pickup_date=datetime(2024, 6, 1, tzinfo=timezone.utc),
        dropoff_date=datetime(2024, 6, 2, tzinfo=timezone.utc),
        total_price=Decimal("40.00"),
        extra_ids=[77],
    )

    with pytest.raises(ValidationError):
        await reservations.add(reservation)

    assert await reservations.get_all() == []


@pytest.mark.asyncio
async def test_dashboard_add_and_update(dashboards):
    await dashboards.add(
        AdminDashboardData(dashboard_id=1, total_reservations=100, total_revenue=Decimal("5000.50"))
    )

    existing = await dashboards.get_by_id(1)
    existing.total_reservations = 150
    await dashboards.update(existing)

    result = await dashboards.get_by_id(1)
    assert result.total_reservations == 150
    assert result.total_revenue == Decimal("5000.50")


@pytest.mark.asyncio
async def test_dashboard_compute_live_totals(session_factory, dashboards):
    users = SqlAlchemyUserRepository(session_factory)
    cars = SqlAlchemyCarRepository(session_factory)
    payments = SqlAlchemyPaymentRepository(session_factory)
    await users.add(User(first_name="A", last_name="B", email="a@b.c"))
    await cars.add(Car(make="Kia", model="Rio", year=2020, price_per_day=Decimal("30.00")))
    await cars.add(Car(make="VW", model="Golf", year=2021, price_per_day=Decimal("40.00")))
    await payments.add(_payment(amount=Decimal("100.25")))
    await payments.add(_payment(amount=Decimal("50.25")))

    totals = await dashboards.compute_live_totals()

    assert totals.dashboard_id is None
    assert totals.total_users == 1
    assert totals.total_cars == 2
    assert totals.total_reservations == 0
    assert totals.total_reviews == 0
    assert totals.total_revenue == Decimal("150.50")
    # Aggregation does not store a snapshot
    assert await dashboards.get_all() == []


@pytest.mark.asyncio
async def test_dashboard_live_totals_on_empty_database(dashboards):
    totals = await dashboards.compute_live_totals()
    assert totals.total_revenue == Decimal("0.00")
    assert totals.total_users == 0


def test_as_utc_marks_naive_datetimes():
    naive = datetime(2024, 1, 1, 12, 0)
    assert as_utc(naive).tzinfo == timezone.utc
    assert as_utc(PAID_AT) is PAID_AT
    assert as_utc(None) is None


@pytest.mark.asyncio
async def test_add_after_preset_identifier_continues_numbering(payments):
    await payments.add(_payment(payment_id=5))
    payment = _payment()

    await payments.add(payment)

    assert payment.payment_id == 6


async def _seed_user_car(session_factory) -> tuple[User, Car]:
    user = User(first_name="Ada", last_name="Lovelace", email="ada@example.com")
    car = Car(make="Kia", model="Rio", year=2020, price_per_day=Decimal("30.00"))
    await SqlAlchemyUserRepository(session_factory).add(user)
    await SqlAlchemyCarRepository(session_factory).add(car)
    return user, car


@pytest.mark.asyncio
async def test_delete_referenced_user_keeps_reviews(fk_session_factory):
    user, car = await _seed_user_car(fk_session_factory)
    users = SqlAlchemyUserRepository(fk_session_factory)
    reviews = SqlAlchemyReviewRepository(fk_session_factory)
    review = Review(car_id=car.car_id, user_id=user.user_id, rating=5)
    await reviews.add(review)

    with pytest.raises(ResourceInUseError):
        await users.delete(user.user_id)

    assert await users.get_by_id(user.user_id) == user
    assert (await reviews.get_by_id(review.review_id)).user_id == user.user_id


@pytest.mark.asyncio
async def test_delete_referenced_extra_keeps_reservation_extras(fk_session_factory):
    user, car = await _seed_user_car(fk_session_factory)
    extras = SqlAlchemyCarExtraRepository(fk_session_factory)
    reservations = SqlAlchemyReservationRepository(fk_session_factory)
    gps = CarExtra(name="GPS", price=Decimal("5.00"))
    await extras.add(gps)
    reservation = Reservation(
        user_id=user.user_id,
        car_id=car.car_id,
        pickup_date=datetime(2024, 6, 1, tzinfo=timezone.utc),
        dropoff_date=datetime(2024, 6, 2, tzinfo=timezone.utc),
        total_price=Decimal("35.00"),
        extra_ids=[gps.extra_id],
    )
    await reservations.add(reservation)

    with pytest.raises(ResourceInUseError):
        await extras.delete(gps.extra_id)

    stored = await reservations.get_by_id(reservation.reservation_id)
    assert stored.extra_ids == [gps.extra_id]


@pytest.mark.asyncio
async def test_delete_reservation_releases_its_extras(fk_session_factory):
    user, car = await _seed_user_car(fk_session_factory)
    extras = SqlAlchemyCarExtraRepository(fk_session_factory)
    reservations = SqlAlchemyReservationRepository(fk_session_factory)
    gps = CarExtra(name="GPS", price=Decimal("5.00"))
    await extras.add(gps)
    reservation = Reservation(
        user_id=user.user_id,
        car_id=car.car_id,
        pickup_date=datetime(2024, 6, 1, tzinfo=timezone.utc),
        dropoff_date=datetime(2024, 6, 2, tzinfo=timezone.utc),
        total_price=Decimal("35.00"),
        extra_ids=[gps.extra_id],
    )
    await reservations.add(reservation)

    await reservations.delete(reservation.reservation_id)

    assert await reservations.get_by_id(reservation.reservation_id) is None
    assert await extras.get_by_id(gps.extra_id) == gps
    # The extra is no longer referenced, so it can go too
    await extras.delete(gps.extra_id)
    assert await extras.get_all() == []


@pytest.mark.asyncio
async def test_add_with_missing_reference_raises_conflict(fk_session_factory):
    payments = SqlAlchemyPaymentRepository(fk_session_factory)

    with pytest.raises(ConflictError) as exc_info:
        await payments.add(_payment(reservation_id=999))

    assert not isinstance(exc_info.value, DuplicateResourceError)
    assert await payments.get_all() == []
