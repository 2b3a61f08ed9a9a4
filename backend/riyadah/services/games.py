"""
Game submission queue: submit, list and moderate.
"""
import logging

from riyadah.core.errors import NotFound, ValidationError
from riyadah.models.game import GAME_STATUSES, Game
from riyadah.schemas.game import GameSubmitIn

logger = logging.getLogger("uvicorn.error")


def game_to_dict(g: Game) -> dict:
    return {
        "id": str(g.id),
        "title": g.title,
        "developer": g.developer,
        "genre": g.genre,
        "description": g.description,
        "image_url": g.image_url,
        "submitted_by": g.submitted_by,
        "status": g.status,
        "created_at": g.created_at.isoformat() if g.created_at else None,
        "updated_at": g.updated_at.isoformat() if g.updated_at else None,
    }


async def list_games() -> list[Game]:
    return await Game.all().order_by("-created_at")


async def submit_game(body: GameSubmitIn, submitted_by: str) -> Game:
    if not body.title or not body.developer or not body.genre:
        raise ValidationError("Title, developer, and genre are required")
    return await Game.create(
        title=body.title,
        developer=body.developer,
        genre=body.genre,
        description=body.description,
        image_url=body.image_url,
        submitted_by=submitted_by,
        status="pending",
    )


async def update_game_status(game_id, new_status: str | None, moderator_id: str) -> Game:
    if not new_status:
        raise ValidationError("Status is required")
    if new_status not in GAME_STATUSES:
        raise ValidationError("Invalid status")

    g = await Game.get_or_none(id=game_id)
    if g is None:
        raise NotFound("Game not found")
    g.status = new_status
    await g.save()  # auto_now refreshes updated_at
    logger.info("[games] %s -> %s by %s", g.id, new_status, moderator_id)
    return g
