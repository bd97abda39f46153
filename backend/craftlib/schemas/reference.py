"""
Pydantic schemas for reference data - statuses, craft types, material types
"""
from typing import Optional
from pydantic import BaseModel


class StatusResponse(BaseModel):
    """Project lifecycle label"""
    id: int
    description: Optional[str] = None

    class Config:
        from_attributes = True


class CraftTypeResponse(BaseModel):
    """Craft discipline"""
    id: int
    name: str

    class Config:
        from_attributes = True


class MaterialTypeResponse(BaseModel):
    """Material category and its unit"""
    id: int
    description: Optional[str] = None
    units: Optional[str] = None

    class Config:
        from_attributes = True
