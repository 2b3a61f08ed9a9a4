"""
Database models for accounts.

Four account kinds share one shape but live in separate tables (partitions):
users, admins, hosts and moderators. Email uniqueness holds inside a
partition only, so the same address may exist as a User and as an Admin.
The role is implied by the partition and is not stored.
"""
import uuid
from tortoise import fields, models


class AccountBase(models.Model):
    """
    Fields shared by every account partition.

    Security:
    - Password is stored as a hash (never store plain text passwords)
    - Email is stored normalized (trimmed, lower-cased)
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Immutable account identifier
    name = fields.CharField(max_length=128)  # Display name
    email = fields.CharField(max_length=256, unique=True, index=True)  # Unique within this partition
    password_hash = fields.CharField(max_length=255)  # Argon2 hash
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)  # Refreshed on every save

    class Meta:
        abstract = True


class User(AccountBase):
    """
    Standard community member. The only partition that holds a points balance.

    Relationships:
    - Has many ActivityLog entries (related_name="activity")
    - Has many RewardClaims (related_name="reward_claims")
    - Has many TournamentParticipants (related_name="participations")
    """
    points = fields.IntField(default=0)  # Non-negative balance, welcome bonus is granted at registration
    avatar = fields.CharField(max_length=512, null=True)

    class Meta:
        table = "users"


class Admin(AccountBase):
    class Meta:
        table = "admins"


class Host(AccountBase):
    class Meta:
        table = "hosts"


class Moderator(AccountBase):
    class Meta:
        table = "moderators"


# Role name -> partition model
ACCOUNT_MODELS: dict[str, type[AccountBase]] = {
    "user": User,
    "admin": Admin,
    "host": Host,
    "moderator": Moderator,
}
