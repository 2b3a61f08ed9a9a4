"""
Database models module initialization.
Exports all database models for convenient imports throughout the application.

Models exported:
- User, Admin, Host, Moderator: account partitions (see account.py)
- ActivityLog: append-only user activity trail
- Reward, RewardClaim: points store and completed claims
- Tournament, TournamentParticipant: tournaments and user participation
- Game: game submission queue
"""
from .account import ACCOUNT_MODELS, AccountBase, Admin, Host, Moderator, User
from .activity import ActivityLog
from .reward import Reward, RewardClaim
from .tournament import Tournament, TournamentParticipant
from .game import Game
