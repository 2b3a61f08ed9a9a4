"""
Database model for the user activity log.
Append-only audit trail of user actions; rows are never updated or deleted.
"""
from tortoise import fields, models


class ActivityLog(models.Model):
    id = fields.IntField(pk=True)
    user = fields.ForeignKeyField("models.User", related_name="activity", on_delete=fields.CASCADE)
    activity_type = fields.CharField(max_length=32)  # registration / login / profile_update / reward_claim / ...
    description = fields.CharField(max_length=255)
    points_change = fields.IntField(default=0)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "user_activity"
