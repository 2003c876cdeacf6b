"""Car repository port."""

from roadready.application.ports.repository import Repository
from roadready.domain.entities.car import Car


class CarRepository(Repository[Car]):
    """Port interface for car repository."""
