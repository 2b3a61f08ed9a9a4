"""
Database models for tournaments and user participation.
"""
import uuid
from tortoise import fields, models

TOURNAMENT_STATUSES = ("upcoming", "ongoing", "completed", "cancelled")


class Tournament(models.Model):
    """
    Tournament database model.

    Only tournaments in the "upcoming" status accept new participants.
    created_by holds the id of the admin or moderator account that created it
    (accounts live in separate partitions, so this is not a foreign key).
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    title = fields.CharField(max_length=200)
    game_name = fields.CharField(max_length=128)
    description = fields.TextField(null=True)
    start_date = fields.DatetimeField()
    end_date = fields.DatetimeField()
    prize_pool = fields.CharField(max_length=64, null=True)
    max_participants = fields.IntField(default=100)
    status = fields.CharField(max_length=16, default="upcoming")
    created_by = fields.CharField(max_length=64, null=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "tournaments"


class TournamentParticipant(models.Model):
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    user = fields.ForeignKeyField("models.User", related_name="participations", on_delete=fields.CASCADE)
    tournament = fields.ForeignKeyField("models.Tournament", related_name="participants", on_delete=fields.CASCADE)
    joined_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "user_tournaments"
        unique_together = (("user", "tournament"),)  # One participation per user per tournament
