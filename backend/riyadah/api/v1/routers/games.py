import uuid

from fastapi import APIRouter, Depends, status

from riyadah.api.v1.deps import get_current_identity, require_admin_or_moderator
from riyadah.models.account import AccountBase
from riyadah.schemas.auth import TokenIdentity
from riyadah.schemas.game import GameStatusIn, GameSubmitIn
from riyadah.services import games

router = APIRouter(prefix="/games", tags=["games"])


@router.get("")
async def list_games(_identity: TokenIdentity = Depends(get_current_identity)):
    """Submitted games, newest first."""
    rows = await games.list_games()
    return [games.game_to_dict(g) for g in rows]


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_game(body: GameSubmitIn, identity: TokenIdentity = Depends(get_current_identity)):
    """Submit a game for review. It enters the queue as "pending"."""
    g = await games.submit_game(body, submitted_by=identity.account_id)
    return games.game_to_dict(g)


@router.put("/{game_id}/status")
async def update_game_status(
    game_id: uuid.UUID,
    body: GameStatusIn,
    staff: AccountBase = Depends(require_admin_or_moderator),
):
    """
    Move a game through review (admin / moderator only).
    Valid statuses: pending, approved, testing, completed, rejected.
    """
    g = await games.update_game_status(game_id, body.status, moderator_id=str(staff.id))
    return games.game_to_dict(g)
