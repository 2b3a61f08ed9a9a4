import uuid
from tortoise import fields, models


class Reward(models.Model):
    """
    An item in the points store.
    - points: cost in points
    - stock: remaining count, never negative
    - is_active: hidden from the store listing when False
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    name = fields.CharField(max_length=128)
    description = fields.TextField(null=True)
    image_url = fields.CharField(max_length=512, null=True)
    points = fields.IntField()
    stock = fields.IntField(default=0)
    is_active = fields.BooleanField(default=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "rewards"


class RewardClaim(models.Model):
    """A completed exchange of points for a reward. Created once, never changed."""
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    user = fields.ForeignKeyField("models.User", related_name="reward_claims", on_delete=fields.CASCADE)
    reward = fields.ForeignKeyField("models.Reward", related_name="claims", on_delete=fields.CASCADE)
    claimed_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "user_rewards"
