"""
Points / reward ledger.

A claim exchanges a user's points for one unit of a reward. The debit, the
stock decrement and the claim record are written in one transaction, and the
two balance writes are conditional updates (``points >= cost``,
``stock > 0``) evaluated by the database. Concurrent claims against the same
user or the same reward therefore cannot overdraw either row: the loser of a
race sees zero affected rows, the transaction rolls back, and the caller gets
InsufficientPoints / OutOfStock.
"""
import logging

from tortoise import timezone
from tortoise.expressions import F
from tortoise.transactions import in_transaction

from riyadah.core.errors import InsufficientPoints, NotFound, OutOfStock
from riyadah.models.account import User
from riyadah.models.reward import Reward, RewardClaim
from riyadah.services.activity import log_activity

logger = logging.getLogger("uvicorn.error")


def reward_to_dict(r: Reward) -> dict:
    return {
        "id": str(r.id),
        "name": r.name,
        "description": r.description,
        "image_url": r.image_url,
        "points": r.points,
        "stock": r.stock,
        "is_active": r.is_active,
        "created_at": r.created_at.isoformat() if r.created_at else None,
    }


def claim_to_dict(c: RewardClaim, include_reward: bool = False) -> dict:
    data = {
        "id": str(c.id),
        "user_id": str(c.user_id),
        "reward_id": str(c.reward_id),
        "claimed_at": c.claimed_at.isoformat() if c.claimed_at else None,
    }
    if include_reward:
        data["reward"] = reward_to_dict(c.reward)
    return data


async def list_active_rewards() -> list[Reward]:
    """Rewards visible in the store, cheapest first."""
    return await Reward.filter(is_active=True).order_by("points", "name")


async def user_claims(user_id) -> list[RewardClaim]:
    """A user's claims, newest first, with the reward loaded."""
    return await (
        RewardClaim.filter(user_id=user_id)
        .order_by("-claimed_at")
        .prefetch_related("reward")
    )


async def claim_reward(user_id, reward_id) -> RewardClaim:
    """
    Exchange points for one unit of a reward.

    Checks run in a fixed order: reward exists, user exists, balance covers
    the cost, stock remains. A failed check mutates nothing.

    Raises:
        NotFound: unknown reward or user
        InsufficientPoints: balance below the reward cost
        OutOfStock: no units left (including losing a race for the last one)
    """
    reward = await Reward.get_or_none(id=reward_id)
    if reward is None:
        raise NotFound("Reward not found")
    user = await User.get_or_none(id=user_id)
    if user is None:
        raise NotFound("User not found")

    if user.points < reward.points:
        raise InsufficientPoints()
    if reward.stock <= 0:
        raise OutOfStock()

    cost = reward.points
    async with in_transaction() as conn:
        debited = await (
            User.filter(id=user.id, points__gte=cost)
            .using_db(conn)
            .update(points=F("points") - cost, updated_at=timezone.now())
        )
        if not debited:
            raise InsufficientPoints()

        taken = await (
            Reward.filter(id=reward.id, stock__gt=0)
            .using_db(conn)
            .update(stock=F("stock") - 1)
        )
        if not taken:
            # Raising inside the block rolls back the debit above
            raise OutOfStock()

        claim = await RewardClaim.create(user_id=user.id, reward_id=reward.id, using_db=conn)

    logger.info("[ledger] user %s claimed reward %s for %d points", user.id, reward.id, cost)
    await log_activity(user.id, "reward_claim", f"Claimed reward: {reward.name}", -cost)
    return claim
