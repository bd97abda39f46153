"""
Report Service

Read-only project listings with craft and status ids replaced by their
names. Every listing outer-joins craft types and statuses, so a project
with a missing reference still shows up (with None in that column).
"""
from typing import Any, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from craftlib.models import CraftType, Project, Status


def _project_listing(db: Session, *columns) -> Query:
    return (
        db.query(*columns)
        .select_from(Project)
        .outerjoin(CraftType, Project.craft_type_id == CraftType.id)
        .outerjoin(Status, Project.status_id == Status.id)
    )


def project_summary(db: Session) -> List[Any]:
    """
    Craft, project name and status for every project, ordered by craft
    type then status.
    """
    return (
        _project_listing(
            db,
            CraftType.name.label("craft"),
            Project.name.label("project_name"),
            Status.description.label("status"),
        )
        .order_by(Project.craft_type_id, Project.status_id, Project.id)
        .all()
    )


def projects_by_status(db: Session) -> List[Any]:
    """Projects grouped for browsing by status, lowest status id first."""
    return (
        _project_listing(
            db,
            Status.description.label("status"),
            Project.name.label("name"),
            CraftType.name.label("craft"),
            Project.acquired_date.label("date_acquired"),
        )
        .order_by(Project.status_id, Project.id)
        .all()
    )


def project_full(db: Session) -> List[Any]:
    """Every project with its id exposed, ordered by id."""
    return (
        _project_listing(
            db,
            Project.id.label("id"),
            Project.name.label("name"),
            CraftType.name.label("craft"),
            Project.acquired_date.label("date_acquired"),
            Status.description.label("project_status"),
        )
        .order_by(Project.id)
        .all()
    )


def count_projects_by_craft(db: Session, craft_name: Optional[str] = None) -> List[Any]:
    """
    Number of projects per craft type.

    Args:
        db: Database session
        craft_name: Only report this craft (e.g. "Crochet")

    Returns:
        Rows with craft and project_count, ordered by craft name
    """
    query = (
        db.query(
            CraftType.name.label("craft"),
            func.count(Project.craft_type_id).label("project_count"),
        )
        .select_from(Project)
        .outerjoin(CraftType, Project.craft_type_id == CraftType.id)
        .group_by(CraftType.name)
    )

    if craft_name is not None:
        query = query.having(CraftType.name == craft_name)

    return query.order_by(CraftType.name).all()
