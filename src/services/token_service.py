import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt


logger = logging.getLogger("token_service")


class InvalidToken(Exception):
    """Token is malformed, tampered with, expired, or from another issuer."""


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """Issues and verifies HS256 bearer tokens whose subject is the user's login."""

    algorithm = "HS256"

    def __init__(
        self,
        secret: str,
        issuer: str,
        ttl: timedelta = timedelta(hours=2),
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("token secret must not be empty")
        self.secret = secret
        self.issuer = issuer
        self.ttl = ttl
        self.clock = clock or _utcnow

    def issue(self, login: str) -> str:
        now = self.clock()
        payload = {
            "iss": self.issuer,
            "sub": login,
            "iat": int(now.timestamp()),
            "exp": int((now + self.ttl).timestamp()),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def subject(self, token: str) -> str:
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                options={"require": ["exp", "iss", "sub"]},
            )
        except jwt.PyJWTError as e:
            logger.warning(f"[token] rejected: {e}")
            raise InvalidToken("Invalid or expired token") from e
        return payload["sub"]

    @classmethod
    def from_config(cls, config) -> "TokenService":
        return cls(
            secret=config["TOKEN_SECRET"],
            issuer=config["TOKEN_ISSUER"],
            ttl=timedelta(hours=config["TOKEN_TTL_HOURS"]),
        )
