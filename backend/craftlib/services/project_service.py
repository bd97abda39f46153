"""
Project Service

Project writes, the two derived values shown next to each project (age and
total time spent), and the completed-projects query.
"""
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from craftlib.core.config import settings
from craftlib.db.session import commit_or_rollback
from craftlib.exceptions import NotFoundError, ValidationError
from craftlib.logging_config import audit_log, get_logger
from craftlib.models import CraftType, Project, ProjectMaterial, Status, WorkSession

logger = get_logger(__name__)

NOT_STARTED = "Not yet started."


# ============================================================================
# Projects
# ============================================================================

def get_project(db: Session, project_id: int) -> Project:
    """
    Get a project by id

    Raises:
        NotFoundError: If no project has this id
    """
    project = db.query(Project).filter(Project.id == project_id).first()
    if not project:
        raise NotFoundError("Project", project_id)
    return project


def list_projects(
    db: Session,
    status_id: Optional[int] = None,
    craft_type_id: Optional[int] = None,
) -> List[Project]:
    """List projects, optionally filtered by status and/or craft type"""
    query = db.query(Project)

    if status_id is not None:
        query = query.filter(Project.status_id == status_id)
    if craft_type_id is not None:
        query = query.filter(Project.craft_type_id == craft_type_id)

    return query.order_by(Project.id).all()


def create_project(
    db: Session,
    *,
    name: str,
    status_id: int,
    craft_type_id: Optional[int] = None,
    description: Optional[str] = None,
    link: Optional[str] = None,
    acquired_date: Optional[date] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> Project:
    """
    Insert a project.

    Unknown status or craft type ids are rejected by the foreign keys, and
    a missing name or status by the NOT NULL constraints; both surface as
    IntegrityError.
    """
    project = Project(
        name=name,
        status_id=status_id,
        craft_type_id=craft_type_id,
        description=description,
        link=link,
        acquired_date=acquired_date,
        start_date=start_date,
        end_date=end_date,
    )
    db.add(project)
    commit_or_rollback(db)
    db.refresh(project)

    audit_log(
        "PROJECT_CREATED",
        resource_type="project",
        resource_id=project.id,
        details={"name": project.name, "status_id": project.status_id},
    )
    return project


def update_project(db: Session, project_id: int, changes: Dict[str, Any]) -> Project:
    """Apply a partial update to a project"""
    if not changes:
        raise ValidationError("No fields to update")
    project = get_project(db, project_id)

    for field, value in changes.items():
        setattr(project, field, value)

    commit_or_rollback(db)
    db.refresh(project)

    audit_log(
        "PROJECT_UPDATED",
        resource_type="project",
        resource_id=project.id,
        details={"fields": sorted(changes)},
    )
    return project


def delete_project(db: Session, project_id: int) -> None:
    """
    Delete a project.

    There are no cascade rules: a project that still has sessions or
    materials is refused by the store.
    """
    project = get_project(db, project_id)
    db.delete(project)
    commit_or_rollback(db)
    logger.info("Project deleted", extra={"project_id": project_id})

    audit_log("PROJECT_DELETED", resource_type="project", resource_id=project_id)


# ============================================================================
# Project materials
# ============================================================================

def list_project_materials(db: Session, project_id: int) -> List[ProjectMaterial]:
    return (
        db.query(ProjectMaterial)
        .filter(ProjectMaterial.project_id == project_id)
        .order_by(ProjectMaterial.id)
        .all()
    )


def add_project_material(
    db: Session,
    project_id: int,
    material_id: int,
    quantity: Optional[int] = None,
) -> ProjectMaterial:
    """
    Record that a project needs a material.

    Repeating a (project, material) pair adds another row rather than
    merging quantities.
    """
    link = ProjectMaterial(project_id=project_id, material_id=material_id, quantity=quantity)
    db.add(link)
    commit_or_rollback(db)
    db.refresh(link)

    audit_log(
        "PROJECT_MATERIAL_ADDED",
        resource_type="project_material",
        resource_id=link.id,
        details={"project_id": project_id, "material_id": material_id, "quantity": quantity},
    )
    return link


# ============================================================================
# Derived values
# ============================================================================

def project_age(
    acquired_date: Optional[date],
    start_date: Optional[date],
    today: Optional[date] = None,
) -> int:
    """
    Age of a project in whole days.

    Counted from the acquired date, or from the start date when there is no
    acquired date. With neither date the age is 0.

    Args:
        acquired_date: Project.acquired_date
        start_date: Project.start_date
        today: Evaluation date, defaults to date.today()
    """
    today = today or date.today()

    if acquired_date is not None:
        return (today - acquired_date).days
    if start_date is not None:
        return (today - start_date).days
    return 0


def format_total_duration(total_seconds: int) -> str:
    """
    Format summed session time as "<H> hours <MM> minutes".

    Hours are total hours, so 95 hours stays 95 rather than wrapping at a
    day. Leftover seconds are dropped.
    """
    total_minutes = abs(int(total_seconds)) // 60
    sign = "-" if total_seconds < 0 and total_minutes else ""
    hours, minutes = divmod(total_minutes, 60)
    return f"{sign}{hours} hours {minutes:02d} minutes"


def total_time_spent(db: Session, project_id: int) -> str:
    """
    Total time logged against a project.

    SUM over no rows (or only in-progress rows) is NULL, which reads as
    "Not yet started."
    """
    total = (
        db.query(func.sum(WorkSession.duration_seconds))
        .filter(WorkSession.project_id == project_id)
        .scalar()
    )

    if total is None:
        return NOT_STARTED
    return format_total_duration(total)


# ============================================================================
# Completed projects
# ============================================================================

def complete_projects(db: Session, complete_status: Optional[str] = None) -> List[Any]:
    """
    Projects that are finished: they have an end date, or their status is
    the "complete" status.

    The status is matched by description (settings.COMPLETE_STATUS_DESCRIPTION
    unless complete_status is given), never by id.

    Returns:
        Rows with id, name, craft, end_date, status
    """
    complete_status = complete_status or settings.COMPLETE_STATUS_DESCRIPTION

    return (
        db.query(
            Project.id.label("id"),
            Project.name.label("name"),
            CraftType.name.label("craft"),
            Project.end_date.label("end_date"),
            Status.description.label("status"),
        )
        .select_from(Project)
        .outerjoin(CraftType, Project.craft_type_id == CraftType.id)
        .outerjoin(Status, Project.status_id == Status.id)
        .filter(
            or_(
                Project.end_date.isnot(None),
                Status.description == complete_status,
            )
        )
        .order_by(Project.id)
        .all()
    )
