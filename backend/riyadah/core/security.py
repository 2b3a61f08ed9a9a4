# riyadah/core/security.py
"""
Security module for authentication.
Handles password hashing and issuing/verifying the signed access tokens.

Tokens are stateless: validity depends only on the signature and the expiry
claim. There is no revocation list, so logging out is a client-side action
and a leaked token stays usable until it expires. Rotating ``JWT_SECRET``
invalidates every token issued before the rotation.
"""
import asyncio
import datetime as dt

import jwt  # PyJWT
from passlib.context import CryptContext

from riyadah.config import settings
from riyadah.core.errors import ExpiredToken, InvalidToken

# Password hashing context
# Argon2 is a modern, salted, memory-hard password hashing algorithm
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
)

# JWT configuration, read once at import (process-wide, read-only afterwards)
JWT_SECRET = settings.jwt_secret
ACCESS_TOKEN_EXPIRE_DAYS = settings.access_token_expire_days
JWT_ALG = "HS256"  # HMAC SHA-256


def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database)
    """
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Returns False (instead of raising) when the stored hash is unreadable, so
    a corrupt row looks exactly like a wrong password to the caller.
    """
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError):
        return False


async def hash_password_async(plain: str) -> str:
    """Argon2 is CPU-bound; hash in the default executor so the event loop keeps serving."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, hash_password, plain)


async def verify_password_async(plain: str, hashed: str) -> bool:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, verify_password, plain, hashed)


def create_access_token(account_id: str, email: str, role: str, name: str) -> str:
    """
    Create a signed access token for an account.

    Token payload includes:
        - sub: Subject (account ID)
        - email, role, name: identity shown to the client and used for RBAC
        - iat: Issued at timestamp
        - exp: Expiration timestamp (ACCESS_TOKEN_EXPIRE_DAYS after issue)
    """
    now = dt.datetime.now(dt.timezone.utc)
    payload = {
        "sub": account_id,
        "email": email,
        "role": role,
        "name": name,
        "iat": now,
        "exp": now + dt.timedelta(days=ACCESS_TOKEN_EXPIRE_DAYS),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALG)


def decode_access_token(token: str, secret: str | None = None) -> dict:
    """
    Decode and validate an access token.

    Args:
        token: Token string to decode
        secret: Override of the signing secret (defaults to JWT_SECRET)

    Returns:
        Decoded payload dictionary (sub, email, role, name, iat, exp)

    Raises:
        ExpiredToken: If the token is past its expiry
        InvalidToken: If the token is malformed, badly signed or lacks identity claims
    """
    try:
        payload = jwt.decode(
            token,
            secret or JWT_SECRET,
            algorithms=[JWT_ALG],
            options={"require": ["sub", "role", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise ExpiredToken() from e
    except jwt.InvalidTokenError as e:
        raise InvalidToken() from e
    return payload
