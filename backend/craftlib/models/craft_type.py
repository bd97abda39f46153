"""
CraftType model
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from craftlib.db.base import Base


class CraftType(Base):
    """Craft discipline (Crochet, Knitting, Cross stitch, ...)"""
    __tablename__ = "craft_types"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False)

    projects = relationship("Project", back_populates="craft_type", passive_deletes="all")

    def __repr__(self):
        return f"<CraftType {self.id}: {self.name}>"
