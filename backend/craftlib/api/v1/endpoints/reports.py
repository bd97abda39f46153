"""
Report API Endpoints

Read-only project listings with names in place of ids.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from craftlib.db.session import get_db
from craftlib.schemas.report import (
    CompleteProjectRow,
    CraftCountRow,
    ProjectByStatusRow,
    ProjectFullRow,
    ProjectSummaryRow,
)
from craftlib.services import material_service, project_service, report_service


router = APIRouter()


@router.get("/summary", response_model=List[ProjectSummaryRow])
def get_project_summary(db: Session = Depends(get_db)):
    """Craft, project and status, ordered by craft type then status"""
    return [ProjectSummaryRow.model_validate(row) for row in report_service.project_summary(db)]


@router.get("/by-status", response_model=List[ProjectByStatusRow])
def get_projects_by_status(db: Session = Depends(get_db)):
    """Projects ordered by status"""
    return [ProjectByStatusRow.model_validate(row) for row in report_service.projects_by_status(db)]


@router.get("/full", response_model=List[ProjectFullRow])
def get_project_full(db: Session = Depends(get_db)):
    """All projects with their ids; the status column is labelled "Project Status" """
    return [ProjectFullRow.model_validate(row) for row in report_service.project_full(db)]


@router.get("/complete", response_model=List[CompleteProjectRow])
def get_complete_projects(db: Session = Depends(get_db)):
    """Projects that have an end date or the configured complete status"""
    return [CompleteProjectRow.model_validate(row) for row in project_service.complete_projects(db)]


@router.get("/craft-counts", response_model=List[CraftCountRow])
def get_craft_counts(craft: Optional[str] = None, db: Session = Depends(get_db)):
    """
    Number of projects per craft

    - **craft**: Only count this craft, e.g. Crochet
    """
    rows = report_service.count_projects_by_craft(db, craft_name=craft)
    return [CraftCountRow.model_validate(row) for row in rows]


@router.get("/material-types/{description}/projects", response_model=List[str])
def get_projects_using_material_type(description: str, db: Session = Depends(get_db)):
    """Names of projects that need a material of this type, e.g. Aida"""
    return material_service.projects_using_material_type(db, description)
