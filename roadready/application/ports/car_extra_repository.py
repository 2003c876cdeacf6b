"""Car extra repository port."""

from roadready.application.ports.repository import Repository
from roadready.domain.entities.car_extra import CarExtra


class CarExtraRepository(Repository[CarExtra]):
    """Port interface for car extra repository."""
