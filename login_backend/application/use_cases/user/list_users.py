# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserListResponse, UserResponse


class ListUsersUseCase:
    """Use case for listing every registered user without passwords"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self) -> UserListResponse:
        """
        List all users in registration order
        
        Returns:
            UserListResponse with the total and the redacted records
        """
        async with self.user_repository.locked():
            users = await self.user_repository.list_all()
            total = await self.user_repository.count()
        
        return UserListResponse(
            total=total,
            usuarios=[UserResponse.from_user(user) for user in users],
        )
