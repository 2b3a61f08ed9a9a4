"""User activity recording for the dashboard feed."""

import logging

from riyadah.models.activity import ActivityLog

logger = logging.getLogger("uvicorn.error")


async def log_activity(user_id, activity_type: str, description: str, points_change: int = 0) -> ActivityLog | None:
    """
    Append an activity entry for a user.

    The log is observational: a failed write is logged and swallowed so it
    never fails the operation that triggered it.
    """
    try:
        return await ActivityLog.create(
            user_id=user_id,
            activity_type=activity_type,
            description=description,
            points_change=points_change,
        )
    except Exception:
        logger.warning("[activity] failed to record %s for user %s", activity_type, user_id, exc_info=True)
        return None


async def recent_activity(user_id, limit: int = 10) -> list[ActivityLog]:
    return await ActivityLog.filter(user_id=user_id).order_by("-created_at", "-id").limit(limit)


def activity_to_dict(entry: ActivityLog) -> dict:
    return {
        "id": entry.id,
        "user_id": str(entry.user_id),
        "activity_type": entry.activity_type,
        "description": entry.description,
        "points_change": entry.points_change,
        "created_at": entry.created_at.isoformat() if entry.created_at else None,
    }
