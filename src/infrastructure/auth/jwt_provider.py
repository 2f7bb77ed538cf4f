"""JWT identity token service.

Tokens are HS256-signed JWTs with the payload:
    {
        "user": { "id": "user-uuid" },
        "iat": 1234567890,
        "exp": 1235927890
    }
"""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt

from core.config import settings
from core.exceptions import InvalidTokenError, SigningError
from domain.entities.identity import Identity

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JWTAuthProvider:
    """Issues and verifies signed identity tokens.

    The signing secret is handed in at construction and never re-read
    from the environment afterwards.
    """

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_seconds: int = settings.jwt_expire_seconds,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_seconds = expire_seconds
        self._clock = clock

    def issue(self, identity: Identity) -> str:
        """
        Create a token for an identity.

        Args:
            identity: The identity to embed

        Returns:
            The generated JWT string

        Raises:
            SigningError: If no secret is configured or signing fails
        """
        if not self._secret_key:
            logger.error("Refusing to issue token: signing secret is not configured")
            raise SigningError()

        issued_at = self._clock()
        payload: dict[str, Any] = {
            "user": {"id": identity.id},
            "iat": issued_at,
            "exp": issued_at + timedelta(seconds=self._expire_seconds),
        }

        try:
            return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        except JWTError as exc:
            logger.exception("Failed to sign token for user %s", identity.id)
            raise SigningError() from exc

    def verify(self, token: str) -> Identity:
        """
        Verify a token's signature and expiry and extract the identity.

        Every failure raises the same ``InvalidTokenError``; only the log
        line says whether the token expired or was malformed.

        Args:
            token: The JWT to validate

        Returns:
            The identity embedded in the token
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except ExpiredSignatureError:
            logger.info("Rejected expired token")
            raise InvalidTokenError() from None
        except JWTError as exc:
            logger.info("Rejected malformed token: %s", exc)
            raise InvalidTokenError() from None

        user = payload.get("user")
        user_id = user.get("id") if isinstance(user, dict) else None
        if not isinstance(user_id, str) or not user_id:
            logger.info("Rejected token without a user id in its payload")
            raise InvalidTokenError()

        return Identity(id=user_id)
