"""
Project model
"""
from sqlalchemy import Column, Integer, String, Date, ForeignKey
from sqlalchemy.orm import relationship

from craftlib.db.base import Base


class Project(Base):
    """
    A craft project

    Every project has a status. The three dates are optional in any
    combination; which ones are missing matters to project_age().
    """
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(50), nullable=False)
    craft_type_id = Column(Integer, ForeignKey("craft_types.id"), nullable=True, index=True)
    description = Column(String(250), nullable=True)
    link = Column(String(100), nullable=True)  # pattern URL

    acquired_date = Column(Date, nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)

    status_id = Column(Integer, ForeignKey("statuses.id"), nullable=False, index=True)

    craft_type = relationship("CraftType", back_populates="projects")
    status = relationship("Status", back_populates="projects")
    sessions = relationship(
        "WorkSession",
        back_populates="project",
        order_by="WorkSession.start_time",
        passive_deletes="all",
    )
    project_materials = relationship("ProjectMaterial", back_populates="project", passive_deletes="all")

    def __repr__(self):
        return f"<Project {self.id}: {self.name}>"
