"""
Pydantic schemas for the read-only project reports
"""
from datetime import date
from typing import Optional
from pydantic import BaseModel, Field


class ProjectSummaryRow(BaseModel):
    craft: Optional[str] = None
    project_name: str
    status: Optional[str] = None

    class Config:
        from_attributes = True


class ProjectByStatusRow(BaseModel):
    status: Optional[str] = None
    name: str
    craft: Optional[str] = None
    date_acquired: Optional[date] = None

    class Config:
        from_attributes = True


class ProjectFullRow(BaseModel):
    id: int
    name: str
    craft: Optional[str] = None
    date_acquired: Optional[date] = None
    project_status: Optional[str] = Field(default=None, alias="Project Status")

    class Config:
        from_attributes = True
        populate_by_name = True


class CompleteProjectRow(BaseModel):
    id: int
    name: str
    craft: Optional[str] = None
    end_date: Optional[date] = None
    status: Optional[str] = None

    class Config:
        from_attributes = True


class CraftCountRow(BaseModel):
    craft: Optional[str] = None
    project_count: int

    class Config:
        from_attributes = True
