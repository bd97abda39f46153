"""
MaterialType model

Material categories and the unit each one is measured in
(Yarn in meters, Floss in skeins, Aida in sq cm).
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from craftlib.db.base import Base


class MaterialType(Base):
    """Material category with its standard unit of measurement"""
    __tablename__ = "material_types"

    id = Column(Integer, primary_key=True, index=True)
    description = Column(String(50), nullable=True)  # "Yarn", "Floss", "Aida"
    units = Column(String(10), nullable=True)  # "meters", "skeins", "sq cm"

    materials = relationship("Material", back_populates="material_type", passive_deletes="all")

    def __repr__(self):
        return f"<MaterialType {self.id}: {self.description}>"
