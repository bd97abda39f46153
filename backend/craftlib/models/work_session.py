"""
WorkSession model

Tracks time spent working on each project. The duration column is never
taken from the caller: derive_duration() recomputes it from the two
timestamps whenever the ORM flushes an insert or update. Bulk
query().update() and Core insert()/update() statements bypass the flush
and must not be used to write sessions.

Timestamps are stored as naive UTC. A timestamp that carries an offset is
converted on assignment, so naive and offset-aware inputs can be mixed.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy import Column, Integer, DateTime, ForeignKey, event
from sqlalchemy.orm import relationship, validates

from craftlib.db.base import Base


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Drop the offset of an aware datetime after shifting it to UTC"""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class WorkSession(Base):
    """One timed interval of work on a project - matches sessions table"""
    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=True, index=True)

    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=True)  # NULL while the session is in progress

    # Whole seconds, end_time - start_time
    duration_seconds = Column(Integer, nullable=True)

    project = relationship("Project", back_populates="sessions")

    def __repr__(self):
        return f"<WorkSession {self.id}: project={self.project_id} {self.start_time}>"

    @validates("start_time", "end_time")
    def _store_as_naive_utc(self, key, value):
        return to_naive_utc(value)

    @property
    def duration(self) -> Optional[timedelta]:
        if self.duration_seconds is None:
            return None
        return timedelta(seconds=self.duration_seconds)

    @property
    def in_progress(self) -> bool:
        return self.end_time is None


def derive_duration(work_session: WorkSession) -> Optional[int]:
    """
    Overwrite duration_seconds with end_time - start_time.

    Any value the caller put there is discarded. A missing timestamp gives
    NULL. Start is not checked against end, so an end before the start
    stores a negative duration.
    """
    start = to_naive_utc(work_session.start_time)
    end = to_naive_utc(work_session.end_time)
    if start is None or end is None:
        work_session.duration_seconds = None
    else:
        work_session.duration_seconds = int((end - start).total_seconds())
    return work_session.duration_seconds


@event.listens_for(WorkSession, "before_insert")
@event.listens_for(WorkSession, "before_update")
def _derive_duration_on_write(mapper, connection, target):
    derive_duration(target)
