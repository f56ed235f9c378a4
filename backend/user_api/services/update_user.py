"""UpdateUser — partial overwrite of an existing account.

Invariants:
    - Only fields present in the input replace stored values
    - No fields besides id is a no-op save of the unchanged user
    - Email uniqueness is NOT re-checked; a clash fails on the store constraint (500)
"""

import logging

from user_api.core.domain_types import User, UserId
from user_api.core.errors import NotFoundError
from user_api.core.repository_protocols import UserRepository
from user_api.schemas.user import UpdateUserInput
from user_api.services.validate_input import parse_input

logger = logging.getLogger(__name__)

_MUTABLE_FIELDS = ("name", "email", "password")


class UpdateUser:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def execute(self, raw: object) -> User:
        data = parse_input(UpdateUserInput, raw)
        user_id = UserId(data.id)
        user = await self.repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User with ID {user_id} not found")
        for field in _MUTABLE_FIELDS:
            if field in data.model_fields_set:
                setattr(user, field, getattr(data, field))
        saved = await self.repository.save(user)
        logger.info("User updated", extra={"user_id": saved.id})
        return saved
