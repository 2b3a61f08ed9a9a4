# riyadah/api/v1/deps.py
"""
Access guard dependencies.

Two stages:
  1. get_current_identity: bearer token -> verified claims (authentication)
  2. require_role(...): role membership, then re-resolve the live account so a
     deleted account holding a still-valid token is rejected (authorization)
"""
from fastapi import Depends, Header, Request

from riyadah.core.errors import Forbidden, Unauthenticated
from riyadah.core.security import decode_access_token
from riyadah.models.account import AccountBase
from riyadah.schemas.auth import TokenIdentity
from riyadah.services.accounts import find_by_id


async def get_current_identity(
    request: Request,
    authorization: str | None = Header(default=None),
) -> TokenIdentity:
    """
    FastAPI dependency returning the identity carried by the bearer token.

    Raises:
        Unauthenticated (401): "No token provided" / "Invalid token format"
        InvalidToken (401): bad signature or malformed token
        ExpiredToken (401): token past its expiry
    """
    if not authorization:
        raise Unauthenticated("No token provided")

    token = ""
    if authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
    if not token:
        raise Unauthenticated("Invalid token format")

    identity = TokenIdentity.from_claims(decode_access_token(token))
    request.state.identity = identity
    return identity


def require_role(*roles: str):
    """
    Build a dependency that admits only the given roles.

    Usage:
        @router.post("", dependencies=[Depends(require_admin_or_moderator)])
        async def create(account: AccountBase = Depends(require_user)): ...
    """
    allowed = frozenset(roles)

    async def _guard(
        request: Request,
        identity: TokenIdentity = Depends(get_current_identity),
    ) -> AccountBase:
        if identity.role not in allowed:
            raise Forbidden("Insufficient permissions")
        account = await find_by_id(identity.role, identity.account_id)
        if account is None:
            raise Unauthenticated("User not found")
        request.state.account = account
        return account

    return _guard


require_user = require_role("user")
require_admin = require_role("admin")
require_host = require_role("host")
require_moderator = require_role("moderator")
require_admin_or_moderator = require_role("admin", "moderator")
require_admin_or_host = require_role("admin", "host")
require_staff = require_role("admin", "moderator", "host")
