import uuid

from fastapi import APIRouter, Depends, status

from riyadah.api.v1.deps import get_current_identity, require_admin_or_moderator, require_user
from riyadah.models.account import AccountBase, User
from riyadah.schemas.tournament import TournamentCreateIn
from riyadah.services import tournaments

router = APIRouter(prefix="/tournaments", tags=["tournaments"], dependencies=[Depends(get_current_identity)])


@router.get("")
async def list_tournaments():
    """All tournaments, soonest start first."""
    rows = await tournaments.list_tournaments()
    return [tournaments.tournament_to_dict(t) for t in rows]


@router.get("/user")
async def list_my_tournaments(user: User = Depends(require_user)):
    rows = await tournaments.user_tournaments(user.id)
    return [tournaments.participation_to_dict(p, include_tournament=True) for p in rows]


@router.get("/{tournament_id}")
async def get_tournament(tournament_id: uuid.UUID):
    """Tournament detail including its participants."""
    t = await tournaments.get_tournament(tournament_id)
    data = tournaments.tournament_to_dict(t)
    data["participants"] = [tournaments.participation_to_dict(p) for p in t.participants]
    return data


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_tournament(
    body: TournamentCreateIn,
    staff: AccountBase = Depends(require_admin_or_moderator),
):
    """
    Create a tournament (admin / moderator only).

    Required: title, game_name, start_date, end_date. max_participants
    defaults to 100 and the tournament opens in the "upcoming" status.
    """
    t = await tournaments.create_tournament(body, created_by=str(staff.id))
    return tournaments.tournament_to_dict(t)


@router.post("/{tournament_id}/join", status_code=status.HTTP_201_CREATED)
async def join_tournament(tournament_id: uuid.UUID, user: User = Depends(require_user)):
    p = await tournaments.join_tournament(user.id, tournament_id)
    return tournaments.participation_to_dict(p)


@router.delete("/{tournament_id}/leave")
async def leave_tournament(tournament_id: uuid.UUID, user: User = Depends(require_user)):
    """Leave a tournament. Leaving one you never joined is not an error."""
    await tournaments.leave_tournament(user.id, tournament_id)
    return {"message": "Successfully left tournament"}
