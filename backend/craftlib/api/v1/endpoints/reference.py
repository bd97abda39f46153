"""
Reference Data API Endpoints

Statuses, craft types and material types used to fill in dropdowns.
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from craftlib.db.session import get_db
from craftlib.schemas.reference import CraftTypeResponse, MaterialTypeResponse, StatusResponse
from craftlib.services.material_service import list_material_types
from craftlib.services.reference_service import list_craft_types, list_statuses


router = APIRouter()


@router.get("/statuses", response_model=List[StatusResponse])
def get_statuses(db: Session = Depends(get_db)):
    """List project statuses in id order"""
    return list_statuses(db)


@router.get("/craft-types", response_model=List[CraftTypeResponse])
def get_craft_types(db: Session = Depends(get_db)):
    """List craft types in id order"""
    return list_craft_types(db)


@router.get("/material-types", response_model=List[MaterialTypeResponse])
def get_material_types(db: Session = Depends(get_db)):
    """List material types with their units"""
    return list_material_types(db)
