"""
Craft Library models

Import order follows foreign keys: reference tables first.
"""
from craftlib.models.status import Status
from craftlib.models.craft_type import CraftType
from craftlib.models.materials import MaterialType, Material
from craftlib.models.project import Project
from craftlib.models.work_session import WorkSession, derive_duration
from craftlib.models.project_material import ProjectMaterial

__all__ = [
    "Status",
    "CraftType",
    "MaterialType",
    "Material",
    "Project",
    "WorkSession",
    "derive_duration",
    "ProjectMaterial",
]
