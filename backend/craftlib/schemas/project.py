"""
Pydantic schemas for projects
"""
from datetime import date
from typing import Optional
from pydantic import BaseModel, Field


class ProjectBase(BaseModel):
    """Fields shared by create and response"""
    name: str = Field(..., min_length=1, max_length=50)
    craft_type_id: Optional[int] = None
    description: Optional[str] = Field(default=None, max_length=250)
    link: Optional[str] = Field(default=None, max_length=100, description="Pattern URL")
    acquired_date: Optional[date] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status_id: int


class ProjectCreate(ProjectBase):
    """Create a new project"""
    pass


class ProjectUpdate(BaseModel):
    """Update an existing project. Only fields that are sent are changed."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    craft_type_id: Optional[int] = None
    description: Optional[str] = Field(default=None, max_length=250)
    link: Optional[str] = Field(default=None, max_length=100)
    acquired_date: Optional[date] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status_id: Optional[int] = None


class ProjectResponse(ProjectBase):
    id: int

    class Config:
        from_attributes = True


class ProjectAgeResponse(BaseModel):
    """Age of a project in days; 0 when it has neither an acquired nor a start date"""
    project_id: int
    age_days: int


class TimeSpentResponse(BaseModel):
    """Summed session time, or "Not yet started." """
    project_id: int
    total_time_spent: str
