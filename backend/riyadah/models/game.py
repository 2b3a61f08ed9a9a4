"""
Database model for the game submission queue.
Community members submit games; admins and moderators move them through review.
"""
import uuid
from tortoise import fields, models

GAME_STATUSES = ("pending", "approved", "testing", "completed", "rejected")


class Game(models.Model):
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    title = fields.CharField(max_length=200)
    developer = fields.CharField(max_length=128)
    genre = fields.CharField(max_length=64)
    description = fields.TextField(null=True)
    image_url = fields.CharField(max_length=512, null=True)
    submitted_by = fields.CharField(max_length=64)  # Account id of the submitter (any partition)
    status = fields.CharField(max_length=16, default="pending")
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "games"
