"""Reservation repository port."""

from roadready.application.ports.repository import Repository
from roadready.domain.entities.reservation import Reservation


class ReservationRepository(Repository[Reservation]):
    """Port interface for reservation repository."""
