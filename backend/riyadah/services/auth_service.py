"""
Registration, login, profile and dashboard for every account partition.

Only the User partition can self-register; staff accounts (admin, host,
moderator) are provisioned by the bootstrap step and log in through their own
endpoints. A login failure never reveals whether the email exists.
"""
import asyncio
import logging

from tortoise.exceptions import IntegrityError

from riyadah.config import settings
from riyadah.core.errors import (
    ConflictError,
    InvalidCredentials,
    NotFound,
    UnsupportedOperation,
    ValidationError,
)
from riyadah.core.security import create_access_token, hash_password_async, verify_password_async
from riyadah.models.account import AccountBase, User
from riyadah.schemas.auth import ProfileUpdateIn, RegisterIn, TokenIdentity
from riyadah.services import ledger, tournaments
from riyadah.services.accounts import account_to_dict, find_by_email, find_by_id, normalize_email
from riyadah.services.activity import activity_to_dict, log_activity, recent_activity

logger = logging.getLogger("uvicorn.error")


def issue_token(account: AccountBase, role: str) -> str:
    return create_access_token(str(account.id), account.email, role, account.name)


async def register(body: RegisterIn) -> tuple[str, User]:
    """
    Create a standard user with the welcome bonus and return (token, user).

    Raises:
        ValidationError: missing field or password too short
        ConflictError: a user with this email already exists
    """
    name = (body.name or "").strip()
    email = normalize_email(body.email or "")
    if not name or not email or not body.password:
        raise ValidationError("Name, email, and password are required")
    if len(body.password) < settings.min_password_length:
        raise ValidationError(f"Password must be at least {settings.min_password_length} characters")

    if await User.filter(email=email).exists():
        raise ConflictError("User already exists with this email")

    bonus = settings.welcome_bonus_points
    try:
        user = await User.create(
            name=name,
            email=email,
            password_hash=await hash_password_async(body.password),
            points=bonus,
        )
    except IntegrityError as e:
        # Concurrent registration with the same email won the unique index
        raise ConflictError("User already exists with this email") from e

    logger.info("[auth] registered user %s", user.id)
    await log_activity(user.id, "registration", "User registered", bonus)
    return issue_token(user, "user"), user


async def login(email: str | None, password: str | None, role: str = "user") -> tuple[str, AccountBase]:
    """
    Authenticate against the partition for ``role`` and return (token, account).

    Unknown email and wrong password raise the same InvalidCredentials error.
    """
    email = normalize_email(email or "")
    if not email or not password:
        raise ValidationError("Email and password are required")

    account = await find_by_email(role, email)
    if account is None or not await verify_password_async(password, account.password_hash):
        raise InvalidCredentials()

    if role == "user":
        await log_activity(account.id, "login", "User logged in")
    logger.info("[auth] %s %s logged in", role, account.id)
    return issue_token(account, role), account


async def get_profile(identity: TokenIdentity) -> dict:
    account = await find_by_id(identity.role, identity.account_id)
    if account is None:
        raise NotFound("User not found")
    return account_to_dict(account, identity.role)


async def update_profile(identity: TokenIdentity, body: ProfileUpdateIn) -> dict:
    if identity.role != "user":
        raise UnsupportedOperation("Profile updates not supported for this role")

    user = await find_by_id("user", identity.account_id)
    if user is None:
        raise NotFound("User not found")

    if body.name and body.name.strip():
        user.name = body.name.strip()
    if body.avatar:
        user.avatar = body.avatar
    await user.save()  # auto_now refreshes updated_at

    await log_activity(user.id, "profile_update", "Profile updated")
    return account_to_dict(user, identity.role)


async def get_dashboard(identity: TokenIdentity) -> dict:
    """
    Aggregate the user's account, participations, claims and recent activity.

    The four reads are independent and run concurrently; if any of them
    fails the whole call fails.
    """
    if identity.role != "user":
        raise UnsupportedOperation("Dashboard data only available for users")

    user, participations, claims, activity = await asyncio.gather(
        find_by_id("user", identity.account_id),
        tournaments.user_tournaments(identity.account_id),
        ledger.user_claims(identity.account_id),
        recent_activity(identity.account_id, settings.dashboard_activity_limit),
    )
    if user is None:
        raise NotFound("User not found")

    return {
        "user": account_to_dict(user),
        "tournaments": [tournaments.participation_to_dict(p, include_tournament=True) for p in participations],
        "rewards": [ledger.claim_to_dict(c, include_reward=True) for c in claims],
        "activity": [activity_to_dict(a) for a in activity],
        "stats": {
            "totalTournaments": len(participations),
            "totalRewards": len(claims),
            "totalPoints": user.points,
        },
    }
