# External package imports
from fastapi import APIRouter

# Local application imports
from ..application.dto.user_dto import UserListResponse
from ..application.use_cases.user.list_users import ListUsersUseCase
from ..di.container import get_container


router = APIRouter(tags=["users"])


@router.get("/users", response_model=UserListResponse)
async def list_users() -> UserListResponse:
    """
    List every registered user without passwords
    
    Returns:
        UserListResponse with total and usuarios
    """
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)
    return await list_users_use_case.execute()
