"""
Account partition lookups.

All four account kinds are reached through the same two functions, keyed by
role name, so callers never branch on the partition themselves.
"""
import uuid

from riyadah.models.account import ACCOUNT_MODELS, AccountBase, User

ROLES = tuple(ACCOUNT_MODELS)


def normalize_email(email: str) -> str:
    """Trim and lower-case an email before any comparison or storage."""
    return email.strip().lower()


def partition_for(role: str) -> type[AccountBase] | None:
    return ACCOUNT_MODELS.get(role)


async def find_by_email(role: str, email: str) -> AccountBase | None:
    model = partition_for(role)
    if model is None:
        return None
    return await model.get_or_none(email=normalize_email(email))


async def find_by_id(role: str, account_id) -> AccountBase | None:
    model = partition_for(role)
    if model is None:
        return None
    try:
        pk = account_id if isinstance(account_id, uuid.UUID) else uuid.UUID(str(account_id))
    except ValueError:
        return None
    return await model.get_or_none(id=pk)


def account_to_dict(account: AccountBase, role: str | None = None) -> dict:
    """
    Convert an account to its API form. The password hash is never included.
    """
    data = {
        "id": str(account.id),
        "name": account.name,
        "email": account.email,
        "created_at": account.created_at.isoformat() if account.created_at else None,
        "updated_at": account.updated_at.isoformat() if account.updated_at else None,
    }
    if isinstance(account, User):
        data["points"] = account.points
        data["avatar"] = account.avatar
    if role:
        data["role"] = role
    return data
