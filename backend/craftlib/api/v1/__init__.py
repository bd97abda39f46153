"""
API v1 Router - Craft Library
"""
from fastapi import APIRouter
from craftlib.api.v1.endpoints import (
    reference,
    materials,
    projects,
    sessions,
    reports,
)

router = APIRouter()

# Statuses, craft types, material types
router.include_router(
    reference.router,
    tags=["reference"]
)

# Stash
router.include_router(
    materials.router,
    prefix="/materials",
    tags=["materials"]
)

# Projects (with their sessions and materials)
router.include_router(
    projects.router,
    prefix="/projects",
    tags=["projects"]
)

# Sessions
router.include_router(
    sessions.router,
    prefix="/sessions",
    tags=["sessions"]
)

# Reports
router.include_router(
    reports.router,
    prefix="/reports",
    tags=["reports"]
)
