"""
Pydantic schemas for work sessions
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class WorkSessionCreate(BaseModel):
    """
    Log or start a work session.

    duration_seconds is accepted for compatibility with callers that send
    one, but the stored duration is always end_time - start_time.
    """
    start_time: datetime
    end_time: Optional[datetime] = Field(default=None, description="Leave empty for an in-progress session")
    duration_seconds: Optional[int] = Field(default=None, description="Ignored; derived on write")


class WorkSessionUpdate(BaseModel):
    """Change a session, usually to add its end time"""
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    duration_seconds: Optional[int] = Field(default=None, description="Ignored; derived on write")


class WorkSessionResponse(BaseModel):
    id: int
    project_id: Optional[int] = None
    start_time: datetime
    end_time: Optional[datetime] = None
    duration_seconds: Optional[int] = None
    in_progress: bool

    class Config:
        from_attributes = True
