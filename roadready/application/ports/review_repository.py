"""Review repository port."""

from abc import abstractmethod
from typing import Optional

from roadready.application.ports.repository import Repository
from roadready.domain.entities.review import Review


class ReviewRepository(Repository[Review]):
    """Port interface for review repository."""

    @abstractmethod
    async def get_by_car_id(self, car_id: int) -> Optional[Review]:
        """
        Get the review attached to a car.

        Args:
            car_id: Car identifier

        Returns:
            The first review for the car, or None if it has none
        """
        pass
