"""
Pydantic schemas for the rewards store.
"""
import uuid

from pydantic import BaseModel, Field


class ClaimRewardIn(BaseModel):
    rewardId: uuid.UUID | None = Field(default=None)  # Reward to claim
