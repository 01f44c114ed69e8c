"""
Authentication service.

Hashes account passwords with bcrypt and issues/validates HS256 JWT access
tokens carrying the account id, role and login identifier (email or UHID).
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

from .config import SecuritySettings, get_settings
from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity resolved from a bearer token."""

    account_id: int
    role: str
    identifier: str
    name: str = ""

    @property
    def is_doctor(self) -> bool:
        return self.role == "doctor"

    @property
    def is_patient(self) -> bool:
        return self.role == "patient"

    @property
    def is_medical(self) -> bool:
        return self.role == "medical"


class AuthService:
    """Password hashing and access token handling"""

    def __init__(self, settings: Optional[SecuritySettings] = None):
        self.settings = settings or get_settings().security

    def hash_password(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.settings.bcrypt_rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        if not password or not password_hash:
            return False
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            logger.warning("Stored password hash is not a valid bcrypt hash")
            return False

    def create_access_token(
        self,
        account_id: int,
        role: str,
        identifier: str,
        name: str = "",
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """Create a signed access token for an account."""
        expire = datetime.now(timezone.utc) + (
            expires_delta or timedelta(minutes=self.settings.access_token_expire_minutes)
        )
        payload = {
            "sub": str(account_id),
            "role": role,
            "identifier": identifier,
            "name": name,
            "exp": expire,
        }
        return jwt.encode(payload, self.settings.secret_key, algorithm=self.settings.algorithm)

    def decode_access_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a token and return the identity it carries.

        Raises:
            AuthenticationError: If the token is expired, tampered or incomplete
        """
        try:
            payload = jwt.decode(
                token, self.settings.secret_key, algorithms=[self.settings.algorithm]
            )
        except ExpiredSignatureError:
            raise AuthenticationError("Access token has expired")
        except JWTError as e:
            raise AuthenticationError("Invalid access token", {"reason": str(e)})

        sub = payload.get("sub")
        role = payload.get("role")
        if not sub or not role:
            raise AuthenticationError("Access token is missing required claims")
        try:
            account_id = int(sub)
        except (TypeError, ValueError):
            raise AuthenticationError("Access token subject is invalid")

        return AuthenticatedUser(
            account_id=account_id,
            role=role,
            identifier=payload.get("identifier", ""),
            name=payload.get("name", ""),
        )

    def get_user_from_header(self, auth_header: Optional[str]) -> AuthenticatedUser:
        """Resolve an ``Authorization: Bearer <token>`` header."""
        if not auth_header:
            raise AuthenticationError(
                "Authentication required. Provide an Authorization Bearer token."
            )
        scheme, _, token = auth_header.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            raise AuthenticationError("Authorization header must use the Bearer scheme")
        return self.decode_access_token(token.strip())


# Global instance
_auth_service: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    """Get global authentication service instance (singleton)"""
    global _auth_service
    if _auth_service is None:
        _auth_service = AuthService()
    return _auth_service
