# riyadah/core/bootstrap.py
"""
Bootstrap module for application initialization.
Staff accounts cannot self-register, so on startup each staff partition
(admin, host, moderator) gets a default account from environment variables.
"""
import os
import logging

from riyadah.core.security import hash_password_async
from riyadah.services.accounts import normalize_email, partition_for

logger = logging.getLogger("uvicorn.error")

STAFF_ROLES = ("admin", "host", "moderator")


async def ensure_staff_account(role: str) -> None:
    """
    If the partition for ``role`` is empty, create its default account.
    Only takes effect under the following conditions:
      - Currently no account exists in that partition
      - And <ROLE>_PASSWORD is set (to avoid using a default weak password)
    Environment variables (ROLE = ADMIN / HOST / MODERATOR):
      <ROLE>_EMAIL    (default: "<role>@riyadahelite.com")
      <ROLE>_NAME     (default: "<Role> Account")
      <ROLE>_PASSWORD (required, otherwise won't create)
    """
    model = partition_for(role)
    if await model.all().exists():
        return  # Partition already provisioned

    prefix = role.upper()
    password = os.getenv(f"{prefix}_PASSWORD")
    if not password:
        logger.warning("[bootstrap] No %s present, but %s_PASSWORD not set -> skip creating default %s.",
                       role, prefix, role)
        return

    email = normalize_email(os.getenv(f"{prefix}_EMAIL", f"{role}@riyadahelite.com"))
    name = os.getenv(f"{prefix}_NAME", f"{role.capitalize()} Account")

    account = await model.create(
        name=name,
        email=email,
        password_hash=await hash_password_async(password),
    )
    logger.warning("[bootstrap] Created default %s -> email=%s id=%s", role, account.email, account.id)


async def ensure_staff_accounts() -> None:
    for role in STAFF_ROLES:
        await ensure_staff_account(role)
