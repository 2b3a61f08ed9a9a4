"""
Tournament listing, creation and participation.
"""
import logging

from tortoise.exceptions import IntegrityError

from riyadah.core.errors import AlreadyRegistered, NotFound, RegistrationClosed, ValidationError
from riyadah.models.tournament import Tournament, TournamentParticipant
from riyadah.schemas.tournament import TournamentCreateIn
from riyadah.services.activity import log_activity

logger = logging.getLogger("uvicorn.error")

DEFAULT_MAX_PARTICIPANTS = 100


def tournament_to_dict(t: Tournament) -> dict:
    return {
        "id": str(t.id),
        "title": t.title,
        "game_name": t.game_name,
        "description": t.description,
        "start_date": t.start_date.isoformat() if t.start_date else None,
        "end_date": t.end_date.isoformat() if t.end_date else None,
        "prize_pool": t.prize_pool,
        "max_participants": t.max_participants,
        "status": t.status,
        "created_by": t.created_by,
        "created_at": t.created_at.isoformat() if t.created_at else None,
    }


def participation_to_dict(p: TournamentParticipant, include_tournament: bool = False) -> dict:
    data = {
        "id": str(p.id),
        "user_id": str(p.user_id),
        "tournament_id": str(p.tournament_id),
        "joined_at": p.joined_at.isoformat() if p.joined_at else None,
    }
    if include_tournament:
        data["tournament"] = tournament_to_dict(p.tournament)
    return data


async def list_tournaments() -> list[Tournament]:
    return await Tournament.all().order_by("start_date")


async def get_tournament(tournament_id) -> Tournament:
    """Load a tournament with its participants, or raise NotFound."""
    t = await Tournament.get_or_none(id=tournament_id).prefetch_related("participants")
    if t is None:
        raise NotFound("Tournament not found")
    return t


async def create_tournament(body: TournamentCreateIn, created_by: str) -> Tournament:
    if not body.title or not body.game_name or not body.start_date or not body.end_date:
        raise ValidationError("Missing required fields")

    t = await Tournament.create(
        title=body.title.strip(),
        game_name=body.game_name.strip(),
        description=body.description,
        start_date=body.start_date,
        end_date=body.end_date,
        prize_pool=str(body.prize_pool) if body.prize_pool is not None else None,
        max_participants=body.max_participants or DEFAULT_MAX_PARTICIPANTS,
        created_by=created_by,
    )
    logger.info("[tournaments] %s created by %s", t.id, created_by)
    return t


async def join_tournament(user_id, tournament_id) -> TournamentParticipant:
    """
    Register a user for an upcoming tournament.

    Raises:
        NotFound: unknown tournament
        RegistrationClosed: tournament is not "upcoming"
        AlreadyRegistered: the user already has a participation record
    """
    t = await Tournament.get_or_none(id=tournament_id)
    if t is None:
        raise NotFound("Tournament not found")
    if t.status != "upcoming":
        raise RegistrationClosed()
    if await TournamentParticipant.filter(user_id=user_id, tournament_id=t.id).exists():
        raise AlreadyRegistered()

    try:
        p = await TournamentParticipant.create(user_id=user_id, tournament_id=t.id)
    except IntegrityError as e:
        # Lost a race against a concurrent join by the same user
        raise AlreadyRegistered() from e

    logger.info("[tournaments] user %s joined %s", user_id, t.id)
    await log_activity(user_id, "tournament_join", f"Joined tournament: {t.title}")
    return p


async def leave_tournament(user_id, tournament_id) -> None:
    """Remove a participation record. Succeeds whether or not one existed."""
    await TournamentParticipant.filter(user_id=user_id, tournament_id=tournament_id).delete()


async def user_tournaments(user_id) -> list[TournamentParticipant]:
    """A user's participations, newest first, with the tournament loaded."""
    return await (
        TournamentParticipant.filter(user_id=user_id)
        .order_by("-joined_at")
        .prefetch_related("tournament")
    )
