"""
Pydantic schemas for tournament endpoints.
"""
import datetime as dt

from pydantic import BaseModel


class TournamentCreateIn(BaseModel):
    """
    Request model for creating a tournament (admin / moderator).
    Required: title, game_name, start_date, end_date (checked by the service).
    """
    title: str | None = None
    game_name: str | None = None
    description: str | None = None
    start_date: dt.datetime | None = None
    end_date: dt.datetime | None = None
    prize_pool: str | int | float | None = None
    max_participants: int | None = None
