"""
Project API Endpoints

Projects, their derived values (age, time spent), their work sessions and
the materials they need.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from craftlib.db.session import get_db
from craftlib.schemas.material import ProjectMaterialCreate, ProjectMaterialResponse
from craftlib.schemas.project import (
    ProjectAgeResponse,
    ProjectCreate,
    ProjectResponse,
    ProjectUpdate,
    TimeSpentResponse,
)
from craftlib.schemas.session import WorkSessionCreate, WorkSessionResponse
from craftlib.services import project_service, session_service


router = APIRouter()


# ============================================================================
# Projects
# ============================================================================

@router.get("", response_model=List[ProjectResponse])
def list_projects(
    status_id: Optional[int] = None,
    craft_type_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    """
    List projects

    - **status_id**: Filter by status
    - **craft_type_id**: Filter by craft type
    """
    return project_service.list_projects(db, status_id=status_id, craft_type_id=craft_type_id)


@router.post("", response_model=ProjectResponse, status_code=201)
def create_project(request: ProjectCreate, db: Session = Depends(get_db)):
    """Create a project. Unknown status or craft type ids are rejected with 409."""
    return project_service.create_project(db, **request.model_dump())


@router.get("/{project_id}", response_model=ProjectResponse)
def get_project(project_id: int, db: Session = Depends(get_db)):
    return project_service.get_project(db, project_id)


@router.patch("/{project_id}", response_model=ProjectResponse)
def update_project(project_id: int, request: ProjectUpdate, db: Session = Depends(get_db)):
    """Update a project. Only fields present in the body are changed."""
    return project_service.update_project(
        db, project_id, request.model_dump(exclude_unset=True)
    )


@router.delete("/{project_id}", status_code=204)
def delete_project(project_id: int, db: Session = Depends(get_db)):
    """Delete a project that has no sessions or materials (409 otherwise)"""
    project_service.delete_project(db, project_id)
    return Response(status_code=204)


# ============================================================================
# Derived values
# ============================================================================

@router.get("/{project_id}/age", response_model=ProjectAgeResponse)
def get_project_age(project_id: int, db: Session = Depends(get_db)):
    """Days since the project was acquired (or started); 0 if neither is known"""
    project = project_service.get_project(db, project_id)
    return ProjectAgeResponse(
        project_id=project.id,
        age_days=project_service.project_age(project.acquired_date, project.start_date),
    )


@router.get("/{project_id}/time-spent", response_model=TimeSpentResponse)
def get_time_spent(project_id: int, db: Session = Depends(get_db)):
    """Total time logged in sessions, e.g. "95 hours 00 minutes" """
    project = project_service.get_project(db, project_id)
    return TimeSpentResponse(
        project_id=project.id,
        total_time_spent=project_service.total_time_spent(db, project.id),
    )


# ============================================================================
# Sessions
# ============================================================================

@router.get("/{project_id}/sessions", response_model=List[WorkSessionResponse])
def list_project_sessions(project_id: int, db: Session = Depends(get_db)):
    project_service.get_project(db, project_id)
    return session_service.list_sessions(db, project_id)


@router.post("/{project_id}/sessions", response_model=WorkSessionResponse, status_code=201)
def log_project_session(project_id: int, request: WorkSessionCreate, db: Session = Depends(get_db)):
    """
    Log a work session, or start one by leaving end_time empty.

    The stored duration is always end_time - start_time.
    """
    project_service.get_project(db, project_id)
    return session_service.log_session(
        db,
        project_id=project_id,
        start_time=request.start_time,
        end_time=request.end_time,
        duration_seconds=request.duration_seconds,
    )


# ============================================================================
# Materials
# ============================================================================

@router.get("/{project_id}/materials", response_model=List[ProjectMaterialResponse])
def list_project_materials(project_id: int, db: Session = Depends(get_db)):
    project_service.get_project(db, project_id)
    return project_service.list_project_materials(db, project_id)


@router.post("/{project_id}/materials", response_model=ProjectMaterialResponse, status_code=201)
def add_project_material(project_id: int, request: ProjectMaterialCreate, db: Session = Depends(get_db)):
    """Add a material to a project. An unknown material id is rejected with 409."""
    project_service.get_project(db, project_id)
    return project_service.add_project_material(
        db,
        project_id=project_id,
        material_id=request.material_id,
        quantity=request.quantity,
    )
