"""
Work Session API Endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from craftlib.db.session import get_db
from craftlib.schemas.session import WorkSessionResponse, WorkSessionUpdate
from craftlib.services import session_service


router = APIRouter()


@router.get("/{session_id}", response_model=WorkSessionResponse)
def get_session(session_id: int, db: Session = Depends(get_db)):
    return session_service.get_session(db, session_id)


@router.patch("/{session_id}", response_model=WorkSessionResponse)
def update_session(session_id: int, request: WorkSessionUpdate, db: Session = Depends(get_db)):
    """
    Update a session, e.g. add the end time to one in progress.

    The duration is re-derived from the timestamps; a duration in the body
    is ignored.
    """
    return session_service.update_session(
        db, session_id, request.model_dump(exclude_unset=True)
    )
