"""
Work Session Service

Logging and editing timed work sessions. Durations are derived by the
WorkSession model on every write, so nothing here computes them.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from craftlib.db.session import commit_or_rollback
from craftlib.exceptions import NotFoundError, ValidationError
from craftlib.logging_config import audit_log, get_logger
from craftlib.models import WorkSession

logger = get_logger(__name__)


def get_session(db: Session, session_id: int) -> WorkSession:
    """
    Get a work session by id

    Raises:
        NotFoundError: If no session has this id
    """
    work_session = db.query(WorkSession).filter(WorkSession.id == session_id).first()
    if not work_session:
        raise NotFoundError("Session", session_id)
    return work_session


def list_sessions(db: Session, project_id: int) -> List[WorkSession]:
    """Sessions for a project, oldest first"""
    return (
        db.query(WorkSession)
        .filter(WorkSession.project_id == project_id)
        .order_by(WorkSession.start_time, WorkSession.id)
        .all()
    )


def log_session(
    db: Session,
    project_id: int,
    start_time: datetime,
    end_time: Optional[datetime] = None,
    duration_seconds: Optional[int] = None,
) -> WorkSession:
    """
    Log (or start) a work session.

    Leave end_time empty to start an in-progress session. A duration passed
    in is accepted but replaced by end_time - start_time when the row is
    written.
    """
    work_session = WorkSession(
        project_id=project_id,
        start_time=start_time,
        end_time=end_time,
        duration_seconds=duration_seconds,
    )
    db.add(work_session)
    commit_or_rollback(db)
    db.refresh(work_session)

    if duration_seconds is not None and duration_seconds != work_session.duration_seconds:
        logger.info(
            "Supplied duration replaced by derived value",
            extra={"session_id": work_session.id, "supplied": duration_seconds},
        )

    audit_log(
        "SESSION_LOGGED",
        resource_type="session",
        resource_id=work_session.id,
        details={
            "project_id": project_id,
            "duration_seconds": work_session.duration_seconds,
        },
    )
    return work_session


def update_session(db: Session, session_id: int, changes: Dict[str, Any]) -> WorkSession:
    """
    Apply a partial update, typically adding the end time to an in-progress
    session. The duration is re-derived from the resulting timestamps.
    """
    if not changes:
        raise ValidationError("No fields to update")
    work_session = get_session(db, session_id)

    for field, value in changes.items():
        setattr(work_session, field, value)

    commit_or_rollback(db)
    db.refresh(work_session)

    audit_log(
        "SESSION_UPDATED",
        resource_type="session",
        resource_id=work_session.id,
        details={
            "fields": sorted(changes),
            "duration_seconds": work_session.duration_seconds,
        },
    )
    return work_session
