"""Unit tests for the CRUD and review use cases with mocked repositories."""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from roadready.application.dtos.payment import PaymentDTO
from roadready.application.dtos.review import ReviewDTO
from roadready.application.errors import NotFoundError, ValidationError
from roadready.application.mappers.payment_mapper import payment_mapper
from roadready.application.use_cases.crud_use_case import CrudUseCase
from roadready.application.use_cases.review_use_case import ReviewUseCase
from roadready.domain.entities.payment import Payment
from roadready.domain.entities.review import Review


@pytest.fixture
def repository():
    """Create mock payment repository."""
    return AsyncMock()


@pytest.fixture
def use_case(repository):
    return CrudUseCase(repository, payment_mapper, "Payment", "payments")


def _stored_payment(payment_id: int = 1) -> Payment:
    return Payment(payment_id=payment_id, reservation_id=3, amount=Decimal("50.00"))


@pytest.mark.asyncio
async def test_list_all_empty_raises_not_found(use_case, repository):
    repository.get_all.return_value = []

    with pytest.raises(NotFoundError, match="No payments found."):
        await use_case.list_all()


@pytest.mark.asyncio
async def test_list_all_maps_entities(use_case, repository):
    repository.get_all.return_value = [_stored_payment(1), _stored_payment(2)]

    result = await use_case.list_all()

    assert [dto.payment_id for dto in result] == [1, 2]
    assert all(isinstance(dto, PaymentDTO) for dto in result)


@pytest.mark.asyncio
async def test_get_missing_raises_not_found(use_case, repository):
    repository.get_by_id.return_value = None

    with pytest.raises(NotFoundError, match="Payment with ID 9 not found."):
        await use_case.get(9)


@pytest.mark.asyncio
async def test_create_returns_dto_with_assigned_id(use_case, repository):
    async def assign_id(entity):
        entity.payment_id = 11

    repository.add.side_effect = assign_id

    created = await use_case.create(PaymentDTO(reservation_id=3, amount=Decimal("50.00")))

    assert created.payment_id == 11
    assert created.amount == Decimal("50.00")


@pytest.mark.asyncio
async def test_update_id_mismatch_rejected_before_repository_access(use_case, repository):
    dto = PaymentDTO(payment_id=2, reservation_id=3, amount=Decimal("50.00"))

    with pytest.raises(ValidationError, match="Payment ID mismatch."):
        await use_case.update(1, dto)

    repository.get_by_id.assert_not_awaited()
    repository.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_missing_raises_not_found(use_case, repository):
    repository.get_by_id.return_value = None
    dto = PaymentDTO(payment_id=1, reservation_id=3, amount=Decimal("50.00"))

    with pytest.raises(NotFoundError):
        await use_case.update(1, dto)

    repository.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_replaces_all_fields(use_case, repository):
    repository.get_by_id.return_value = _stored_payment(1)
    dto = PaymentDTO(
        payment_id=1,
        reservation_id=8,
        amount=Decimal("75.00"),
        payment_status="Completed",
    )

    await use_case.update(1, dto)

    repository.update.assert_awaited_once_with(
        Payment(
            payment_id=1,
            reservation_id=8,
            amount=Decimal("75.00"),
            payment_status="Completed",
        )
    )


@pytest.mark.asyncio
async def test_delete_missing_does_not_delete(use_case, repository):
    repository.get_by_id.return_value = None

    with pytest.raises(NotFoundError):
        await use_case.delete(5)

    repository.delete.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_existing(use_case, repository):
    repository.get_by_id.return_value = _stored_payment(5)

    await use_case.delete(5)

    repository.delete.assert_awaited_once_with(5)


@pytest.mark.asyncio
async def test_review_create_requires_valid_car_id(repository):
    reviews = ReviewUseCase(repository)

    with pytest.raises(ValidationError, match="valid CarId"):
        await reviews.create(ReviewDTO(car_id=0, rating=5))

    repository.add.assert_not_awaited()


@pytest.mark.asyncio
async def test_review_get_by_car_missing(repository):
    repository.get_by_car_id.return_value = None

    with pytest.raises(NotFoundError, match="Review for Car ID 4 not found."):
        await ReviewUseCase(repository).get_by_car(4)


@pytest.mark.asyncio
async def test_review_update_by_car_keeps_review_id(repository):
    repository.get_by_car_id.return_value = Review(review_id=12, car_id=4, rating=2, comment="Meh")

    await ReviewUseCase(repository).update_by_car(4, ReviewDTO(car_id=4, rating=5, comment="Great"))

    updated = repository.update.await_args.args[0]
    assert updated.review_id == 12
    assert updated.rating == 5
    assert updated.comment == "Great"


@pytest.mark.asyncio
async def test_review_update_by_car_mismatch(repository):
    with pytest.raises(ValidationError, match="Car ID mismatch."):
        await ReviewUseCase(repository).update_by_car(4, ReviewDTO(car_id=5, rating=3))

    repository.get_by_car_id.assert_not_awaited()
