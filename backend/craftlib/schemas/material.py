"""
Pydantic schemas for the stash
"""
from typing import Optional
from pydantic import BaseModel, Field


class MaterialBase(BaseModel):
    """Fields shared by create and response"""
    material_type_id: Optional[int] = None
    brand: Optional[str] = Field(default=None, max_length=100)
    brand_code: Optional[str] = Field(default=None, max_length=20)
    brand_weight: Optional[str] = Field(default=None, max_length=10, description="Weight class, e.g. DK or 14 ct")
    colour: Optional[str] = Field(default=None, max_length=50)
    quantity: Optional[int] = Field(default=None, description="Units on hand")
    weight: Optional[int] = Field(default=None, description="Grams")
    length: Optional[float] = None
    width: Optional[float] = None


class MaterialCreate(MaterialBase):
    """Log a purchased material"""
    pass


class MaterialUpdate(BaseModel):
    """Restock, use up, or correct a material"""
    material_type_id: Optional[int] = None
    brand: Optional[str] = Field(default=None, max_length=100)
    brand_code: Optional[str] = Field(default=None, max_length=20)
    brand_weight: Optional[str] = Field(default=None, max_length=10)
    colour: Optional[str] = Field(default=None, max_length=50)
    quantity: Optional[int] = None
    weight: Optional[int] = None
    length: Optional[float] = None
    width: Optional[float] = None


class MaterialResponse(MaterialBase):
    id: int
    display_name: str

    class Config:
        from_attributes = True


class ProjectMaterialCreate(BaseModel):
    """Add a material to a project"""
    material_id: int
    quantity: Optional[int] = None


class ProjectMaterialResponse(BaseModel):
    id: int
    project_id: int
    material_id: int
    quantity: Optional[int] = None

    class Config:
        from_attributes = True
