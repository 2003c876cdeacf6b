"""Payment repository port."""

from roadready.application.ports.repository import Repository
from roadready.domain.entities.payment import Payment


class PaymentRepository(Repository[Payment]):
    """Port interface for payment repository."""
