from fastapi import APIRouter, Depends, status

from riyadah.api.v1.deps import get_current_identity, require_user
from riyadah.core.errors import ValidationError
from riyadah.models.account import User
from riyadah.schemas.reward import ClaimRewardIn
from riyadah.services import ledger

router = APIRouter(prefix="/rewards", tags=["rewards"], dependencies=[Depends(get_current_identity)])


@router.get("")
async def list_rewards():
    """Active rewards, cheapest first."""
    rows = await ledger.list_active_rewards()
    return [ledger.reward_to_dict(r) for r in rows]


@router.get("/user")
async def list_my_rewards(user: User = Depends(require_user)):
    """The caller's claimed rewards, newest first."""
    rows = await ledger.user_claims(user.id)
    return [ledger.claim_to_dict(c, include_reward=True) for c in rows]


@router.post("/claim", status_code=status.HTTP_201_CREATED)
async def claim_reward(body: ClaimRewardIn, user: User = Depends(require_user)):
    """
    Exchange points for a reward.

    Errors:
        400: missing rewardId, insufficient points, out of stock
        404: unknown reward
    """
    if body.rewardId is None:
        raise ValidationError("Reward ID is required")
    claim = await ledger.claim_reward(user.id, body.rewardId)
    return {"message": "Reward claimed successfully", "reward": ledger.claim_to_dict(claim)}
