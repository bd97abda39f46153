"""
Material model

One item in the stash. UK wool is usually described in grams, but length
is needed as well, so both are kept.
"""
from sqlalchemy import Column, Integer, String, Float, ForeignKey
from sqlalchemy.orm import relationship

from craftlib.db.base import Base


class Material(Base):
    """
    Stash item

    Created when a purchase is logged, updated on restock or use. There is
    no delete path.
    """
    __tablename__ = "materials"

    id = Column(Integer, primary_key=True, index=True)

    material_type_id = Column(Integer, ForeignKey("material_types.id"), nullable=True, index=True)

    # Identification
    brand = Column(String(100), nullable=True)  # "DMC", "Patons"
    brand_code = Column(String(20), nullable=True)  # "310", "E3852"
    brand_weight = Column(String(10), nullable=True)  # "DK", "Aran", "14 ct"
    colour = Column(String(50), nullable=True)

    # Stock
    quantity = Column(Integer, nullable=True)  # units on hand
    weight = Column(Integer, nullable=True)  # grams
    length = Column(Float, nullable=True)
    width = Column(Float, nullable=True)

    material_type = relationship("MaterialType", back_populates="materials")
    project_materials = relationship("ProjectMaterial", back_populates="material", passive_deletes="all")

    def __repr__(self):
        return f"<Material {self.id}: {self.brand} {self.colour}>"

    @property
    def display_name(self) -> str:
        """Friendly name for display"""
        parts = [self.brand, self.brand_code, self.colour]
        return " ".join(p for p in parts if p) or f"Material {self.id}"
