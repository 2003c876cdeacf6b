"""Role-keyed response views."""

from typing import Callable, Union

from roadready.adapters.inbound.http.auth import Principal
from roadready.application.dtos.user import UserDTO, UserPublicDTO
from roadready.application.mappers.user_mapper import user_to_public_dto
from roadready.domain.roles import AGENT

UserView = Union[UserDTO, UserPublicDTO]

# Checked in order; the first role the caller holds picks the view
USER_VIEWS: tuple[tuple[str, Callable[[UserDTO], UserView]], ...] = (
    (AGENT, user_to_public_dto),
)


def select_user_view(principal: Principal) -> Callable[[UserDTO], UserView]:
    """
    Pick how user records are shown to the caller.

    Agents only ever see first name, last name, email and phone number;
    everyone else gets the full DTO.

    Args:
        principal: Authenticated caller

    Returns:
        Function projecting a UserDTO into the caller's view
    """
    for role, view in USER_VIEWS:
        if principal.is_in_role(role):
            return view
    return lambda user: user
