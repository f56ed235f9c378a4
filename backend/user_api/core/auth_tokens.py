"""Auth Tokens — signed JWTs bound to a user's id and email.

Invariants:
    - Claims are exactly {id, email, iat, exp}
    - exp = iat + lifetime (default one hour)
    - decode_token rejects bad signatures and expired tokens (jwt.PyJWTError)

Design Decisions:
    - HS256 with a shared secret from settings: the service is both issuer and verifier
"""

from datetime import datetime, timedelta, timezone

import jwt

from user_api.core.domain_types import User

DEFAULT_TOKEN_LIFETIME = timedelta(hours=1)


class TokenIssuer:
    """Issues and verifies tokens with one secret and lifetime."""

    def __init__(
        self,
        secret: str,
        lifetime: timedelta = DEFAULT_TOKEN_LIFETIME,
        algorithm: str = "HS256",
    ):
        self.secret = secret
        self.lifetime = lifetime
        self.algorithm = algorithm

    def issue(self, user: User, now: datetime | None = None) -> str:
        """Sign a token for a persisted user."""
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "id": user.id,
            "email": user.email,
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode(self, token: str) -> dict:
        return jwt.decode(token, self.secret, algorithms=[self.algorithm])
