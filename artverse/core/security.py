# ==============================================================================
# SECURITY MODULE - Authentication Primitives
# ==============================================================================
# Password hashing and session token management
# ==============================================================================

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Union

from jose import JWTError, jwt
from passlib.context import CryptContext

from artverse.core.settings import Settings
from artverse.core.exceptions import (
    TokenExpiredError,
    InvalidTokenError,
)


# ==============================================================================
# PASSWORD HASHING
# ==============================================================================

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=12,
)


def hash_password(password: str) -> str:
    """
    Hash a plaintext password using bcrypt.

    Args:
        password: Plaintext password to hash

    Returns:
        Hashed password string safe for storage

    Example:
        >>> hashed = hash_password("my_secure_password")
        >>> verify_password("my_secure_password", hashed)
        True
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plaintext password against its hash.

    Args:
        plain_password: Plaintext password to verify
        hashed_password: Stored password hash

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


# ==============================================================================
# JWT TOKEN MANAGEMENT
# ==============================================================================

class TokenType:
    """Token type constants."""
    ACCESS = "access"


def create_access_token(
    subject: Union[str, Any],
    settings: Settings,
    expires_delta: Optional[timedelta] = None,
    additional_claims: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Create a signed session token.

    The token carries the user identifier in ``sub`` plus any extra
    claims (role, email). Identity is always re-resolved from storage
    on use, so the claims are informational only.

    Args:
        subject: Token subject (user ID)
        settings: Application settings holding key, algorithm and lifetime
        expires_delta: Custom expiration time (default from settings)
        additional_claims: Extra claims to include in token

    Returns:
        Encoded JWT string

    Example:
        >>> token = create_access_token("65f0...", settings, additional_claims={"role": "buyer"})
        >>> decode_token(token, settings)["sub"]
        '65f0...'
    """
    now = datetime.now(timezone.utc)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode: Dict[str, Any] = {
        "sub": str(subject),
        "exp": expire,
        "iat": now,
        "type": TokenType.ACCESS,
    }

    if additional_claims:
        to_encode.update(additional_claims)

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
    )


def decode_token(token: str, settings: Settings) -> Dict[str, Any]:
    """
    Decode and validate a session token.

    Verifies the token signature and expiration time.

    Args:
        token: JWT token string to decode
        settings: Application settings holding key and algorithm

    Returns:
        Dictionary containing token payload

    Raises:
        TokenExpiredError: If token has expired
        InvalidTokenError: If token is invalid or malformed
    """
    try:
        return jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
        )
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError()
    except JWTError:
        raise InvalidTokenError()
