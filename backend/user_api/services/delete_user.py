"""DeleteUser — removes an existing account by id."""

import logging

from user_api.core.domain_types import UserId
from user_api.core.errors import NotFoundError
from user_api.core.repository_protocols import UserRepository
from user_api.schemas.user import UserIdInput
from user_api.services.validate_input import parse_input

logger = logging.getLogger(__name__)


class DeleteUser:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def execute(self, raw_id: object) -> None:
        user_id = UserId(parse_input(UserIdInput, {"id": raw_id}).id)
        if await self.repository.find_by_id(user_id) is None:
            raise NotFoundError(f"User with ID {user_id} not found")
        await self.repository.delete(user_id)
        logger.info("User deleted", extra={"user_id": user_id})
