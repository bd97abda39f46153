"""
Material Service

Stash lookups and writes: material types, materials, and which projects
use a given kind of material.
"""
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from craftlib.db.session import commit_or_rollback
from craftlib.exceptions import NotFoundError, ValidationError
from craftlib.logging_config import audit_log
from craftlib.models import Material, MaterialType, Project, ProjectMaterial


def list_material_types(db: Session) -> List[MaterialType]:
    return db.query(MaterialType).order_by(MaterialType.id).all()


def get_material(db: Session, material_id: int) -> Material:
    """
    Get a stash item by id

    Raises:
        NotFoundError: If no material has this id
    """
    material = db.query(Material).filter(Material.id == material_id).first()
    if not material:
        raise NotFoundError("Material", material_id)
    return material


def list_materials(
    db: Session,
    material_type_id: Optional[int] = None,
    in_stock_only: bool = False,
) -> List[Material]:
    """
    List the stash

    Args:
        db: Database session
        material_type_id: Only return materials of this type
        in_stock_only: Skip materials with a quantity of zero or unknown
    """
    query = db.query(Material)

    if material_type_id is not None:
        query = query.filter(Material.material_type_id == material_type_id)
    if in_stock_only:
        query = query.filter(Material.quantity > 0)

    return query.order_by(Material.id).all()


def create_material(db: Session, **fields: Any) -> Material:
    """Log a purchased material. An unknown material_type_id is rejected by the store."""
    material = Material(**fields)
    db.add(material)
    commit_or_rollback(db)
    db.refresh(material)

    audit_log(
        "MATERIAL_CREATED",
        resource_type="material",
        resource_id=material.id,
        details={"material_type_id": material.material_type_id, "quantity": material.quantity},
    )
    return material


def update_material(db: Session, material_id: int, changes: Dict[str, Any]) -> Material:
    """Restock or use up a material, or correct its details"""
    if not changes:
        raise ValidationError("No fields to update")
    material = get_material(db, material_id)

    for field, value in changes.items():
        setattr(material, field, value)

    commit_or_rollback(db)
    db.refresh(material)

    audit_log(
        "MATERIAL_UPDATED",
        resource_type="material",
        resource_id=material.id,
        details={"fields": sorted(changes), "quantity": material.quantity},
    )
    return material


def projects_using_material_type(db: Session, description: str) -> List[str]:
    """
    Names of the projects that need at least one material of the given type,
    e.g. every project that uses "Aida".
    """
    material_ids = (
        db.query(Material.id)
        .join(MaterialType, Material.material_type_id == MaterialType.id)
        .filter(MaterialType.description == description)
    )
    project_ids = (
        db.query(ProjectMaterial.project_id)
        .filter(ProjectMaterial.material_id.in_(material_ids))
    )
    rows = (
        db.query(Project.name)
        .filter(Project.id.in_(project_ids))
        .distinct()
        .order_by(Project.name)
        .all()
    )
    return [row.name for row in rows]
