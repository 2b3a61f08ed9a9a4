"""
Pydantic schemas for the game submission queue.
"""
from pydantic import BaseModel


class GameSubmitIn(BaseModel):
    title: str | None = None
    developer: str | None = None
    genre: str | None = None
    description: str | None = None
    image_url: str | None = None


class GameStatusIn(BaseModel):
    status: str | None = None  # pending / approved / testing / completed / rejected
