"""CreateUser — registers a new account with a unique email.

Invariants:
    - Email uniqueness is pre-checked; the store's unique constraint is the backstop
    - A constraint violation on save surfaces as InternalServerError (from the repository)
    - The returned user carries the store-assigned id
"""

import logging

from user_api.core.domain_types import User
from user_api.core.errors import ValidationError
from user_api.core.repository_protocols import UserRepository
from user_api.schemas.user import CreateUserInput
from user_api.services.validate_input import parse_input

logger = logging.getLogger(__name__)


class CreateUser:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def execute(self, raw: object) -> User:
        data = parse_input(CreateUserInput, raw)
        if await self.repository.find_by_email(data.email):
            raise ValidationError("Email already in use")
        user = await self.repository.save(
            User(name=data.name, email=data.email, password=data.password),
        )
        logger.info("User created", extra={"user_id": user.id})
        return user
