"""Resource routers."""

from roadready.adapters.inbound.http.routes import (
    admin_dashboard,
    car_extras,
    cars,
    health,
    payments,
    reservations,
    reviews,
    users,
)

routers = [
    health.router,
    users.router,
    cars.router,
    car_extras.router,
    reservations.router,
    payments.router,
    reviews.router,
    admin_dashboard.router,
]

__all__ = ["routers"]
