"""User routes.

Agents are served a narrowed projection of user records; see ``views.py``.
"""

from fastapi import APIRouter, Depends, Request, Response, status

from roadready.adapters.inbound.http.auth import Principal, require_roles
from roadready.adapters.inbound.http.views import UserView, select_user_view
from roadready.application.dtos.message import MessageResponse
from roadready.application.dtos.user import UserDTO
from roadready.application.use_cases.crud_use_case import CrudUseCase
from roadready.domain.roles import ADMIN, AGENT, CUSTOMER
from roadready.infrastructure.logging.logger import log_request
from roadready.infrastructure.wiring.dependencies import get_user_use_case

router = APIRouter(prefix="/api/user", tags=["Users"])


# response_model=None: the body shape depends on the caller's role
@router.get("", response_model=None)
async def get_all_users(
    principal: Principal = Depends(require_roles(ADMIN, AGENT)),
    use_case: CrudUseCase = Depends(get_user_use_case),
) -> list[UserView]:
    users = await use_case.list_all()
    view = select_user_view(principal)
    return [view(user) for user in users]


@router.get("/{user_id}", response_model=None)
async def get_user_by_id(
    user_id: int,
    principal: Principal = Depends(require_roles(ADMIN, AGENT, CUSTOMER)),
    use_case: CrudUseCase = Depends(get_user_use_case),
) -> UserView:
    user = await use_case.get(user_id)
    return select_user_view(principal)(user)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=UserDTO)
async def create_user(
    user: UserDTO,
    request: Request,
    response: Response,
    _: Principal = Depends(require_roles(ADMIN, CUSTOMER)),
    use_case: CrudUseCase = Depends(get_user_use_case),
) -> UserDTO:
    created = await use_case.create(user)
    response.headers["Location"] = str(request.url_for("get_user_by_id", user_id=created.user_id))
    log_request("users", "create", user_id=created.user_id)
    return created


@router.put("/{user_id}", response_model=MessageResponse)
async def update_user(
    user_id: int,
    user: UserDTO,
    _: Principal = Depends(require_roles(ADMIN)),
    use_case: CrudUseCase = Depends(get_user_use_case),
) -> MessageResponse:
    await use_case.update(user_id, user)
    log_request("users", "update", user_id=user_id)
    return MessageResponse(message=f"User with ID {user_id} has been updated.")


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: int,
    _: Principal = Depends(require_roles(ADMIN)),
    use_case: CrudUseCase = Depends(get_user_use_case),
) -> MessageResponse:
    await use_case.delete(user_id)
    log_request("users", "delete", user_id=user_id)
    return MessageResponse(message=f"User with ID {user_id} has been deleted.")
