"""LoginUser — checks credentials and issues a signed token.

Invariants:
    - Unknown email and wrong password fail with the same UnauthorizedError message
    - Passwords are stored and compared as plain text (hashing is out of scope);
      the comparison is constant-time
    - Token claims are bound to {id, email}, one-hour expiry by default
"""

import hmac
import logging
from dataclasses import dataclass

from user_api.core.auth_tokens import TokenIssuer
from user_api.core.domain_types import User
from user_api.core.errors import UnauthorizedError
from user_api.core.repository_protocols import UserRepository
from user_api.schemas.user import LoginInput
from user_api.services.validate_input import parse_input

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


@dataclass
class LoginResult:
    user: User
    token: str


class LoginUser:
    def __init__(self, repository: UserRepository, token_issuer: TokenIssuer):
        self.repository = repository
        self.token_issuer = token_issuer

    async def execute(self, raw: object) -> LoginResult:
        data = parse_input(LoginInput, raw)
        user = await self.repository.find_by_email(data.email)
        if user is None or not _passwords_match(user.password, data.password):
            raise UnauthorizedError(INVALID_CREDENTIALS)
        logger.info("User logged in", extra={"user_id": user.id})
        return LoginResult(user=user, token=self.token_issuer.issue(user))


def _passwords_match(stored: str, supplied: str) -> bool:
    return hmac.compare_digest(stored.encode(), supplied.encode())
