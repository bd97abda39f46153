"""
ProjectMaterial model

Materials needed for each project. The same (project, material) pair may
appear more than once; each row is a separate quantity entry.
"""
from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship

from craftlib.db.base import Base


class ProjectMaterial(Base):
    """Project <-> Material association with the quantity used"""
    __tablename__ = "project_materials"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    material_id = Column(Integer, ForeignKey("materials.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=True)

    project = relationship("Project", back_populates="project_materials")
    material = relationship("Material", back_populates="project_materials")

    def __repr__(self):
        return f"<ProjectMaterial {self.id}: project={self.project_id} material={self.material_id}>"
