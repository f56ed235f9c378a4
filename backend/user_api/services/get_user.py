"""GetUser — fetches one account by id."""

from user_api.core.domain_types import User, UserId
from user_api.core.errors import NotFoundError
from user_api.core.repository_protocols import UserRepository
from user_api.schemas.user import UserIdInput
from user_api.services.validate_input import parse_input


class GetUser:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def execute(self, raw_id: object) -> User:
        user_id = UserId(parse_input(UserIdInput, {"id": raw_id}).id)
        user = await self.repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User with ID {user_id} not found")
        return user
