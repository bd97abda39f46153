"""
Material API Endpoints

The stash: list, log a purchase, restock or use up.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from craftlib.db.session import get_db
from craftlib.schemas.material import MaterialCreate, MaterialResponse, MaterialUpdate
from craftlib.services import material_service


router = APIRouter()


@router.get("", response_model=List[MaterialResponse])
def list_materials(
    material_type_id: Optional[int] = None,
    in_stock_only: bool = False,
    db: Session = Depends(get_db),
):
    """
    List materials in the stash

    - **material_type_id**: Only materials of this type
    - **in_stock_only**: Skip materials with no quantity on hand
    """
    return material_service.list_materials(
        db,
        material_type_id=material_type_id,
        in_stock_only=in_stock_only,
    )


@router.post("", response_model=MaterialResponse, status_code=201)
def create_material(request: MaterialCreate, db: Session = Depends(get_db)):
    """Log a purchased material"""
    return material_service.create_material(db, **request.model_dump())


@router.get("/{material_id}", response_model=MaterialResponse)
def get_material(material_id: int, db: Session = Depends(get_db)):
    return material_service.get_material(db, material_id)


@router.patch("/{material_id}", response_model=MaterialResponse)
def update_material(material_id: int, request: MaterialUpdate, db: Session = Depends(get_db)):
    """Update a material. Only fields present in the body are changed."""
    return material_service.update_material(
        db, material_id, request.model_dump(exclude_unset=True)
    )
