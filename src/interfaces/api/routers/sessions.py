"""
Prayer sessions API router.

Endpoints:
- POST /api/sessions - log a finished Rosary
- GET /api/sessions - recent sessions
- DELETE /api/sessions - clear the whole history
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.core.domain.prayer_history import format_duration
from src.core.use_cases.record_prayer import record_prayer_use_case
from src.database.models import User
from src.interfaces.api.deps import get_db_user
from src.interfaces.api.schemas import (
    SessionCreate,
    SessionRecordedResponse,
    SessionResponse,
)
from src.storage import session_repo

router = APIRouter(prefix="/api", tags=["sessions"])


@router.post(
    "/sessions",
    response_model=SessionRecordedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_session(
    body: SessionCreate, user: User = Depends(get_db_user)
) -> SessionRecordedResponse:
    result = await record_prayer_use_case.execute(
        user,
        body.category,
        duration_seconds=body.duration_seconds,
        meditation_type=body.meditation_type,
        completed_at=body.completed_at,
    )
    if not result.success or result.session_id is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=result.error_message,
        )

    return SessionRecordedResponse(
        session_id=result.session_id,
        total_count=result.total_count,
        current_streak=result.current_streak,
        longest_streak=result.longest_streak,
        first_today=result.first_today,
    )


@router.get("/sessions", response_model=list[SessionResponse])
async def list_sessions(
    user: User = Depends(get_db_user),
    limit: int = Query(default=20, ge=1, le=100, description="Max items to return"),
) -> list[SessionResponse]:
    sessions = await session_repo.recent_sessions(user, limit=limit)
    return [
        SessionResponse(
            id=s.id,
            category=s.category,
            completed_at=s.completed_at,
            duration_seconds=s.duration_seconds,
            duration_label=format_duration(s.duration_seconds),
            meditation_type=s.meditation_type,
        )
        for s in sessions
    ]


@router.delete("/sessions")
async def clear_sessions(user: User = Depends(get_db_user)) -> dict[str, int]:
    deleted = await session_repo.delete_all_sessions(user)
    return {"deleted": deleted}
