# riyadah/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Fields are optional on purpose: missing values are reported by the service
with a readable message instead of a raw pydantic error.
"""
from pydantic import BaseModel


class RegisterIn(BaseModel):
    """Request model for user self-registration."""
    name: str | None = None
    email: str | None = None
    password: str | None = None  # Plain text, hashed server-side


class LoginIn(BaseModel):
    """Request model for every login endpoint (user and staff)."""
    email: str | None = None
    password: str | None = None


class ProfileUpdateIn(BaseModel):
    """Only provided, non-empty fields are applied."""
    name: str | None = None
    avatar: str | None = None


class TokenIdentity(BaseModel):
    """
    Identity decoded from a verified access token.
    Attached to the request state by the access guard.
    """
    account_id: str
    email: str | None = None
    role: str
    name: str | None = None

    @classmethod
    def from_claims(cls, claims: dict) -> "TokenIdentity":
        return cls(
            account_id=str(claims["sub"]),
            email=claims.get("email"),
            role=claims["role"],
            name=claims.get("name"),
        )
