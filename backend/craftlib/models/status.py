"""
Status model

Project lifecycle labels: Queued, In progress, On hold, Abandoned, Complete.
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from craftlib.db.base import Base


class Status(Base):
    """Lifecycle label attached to every project"""
    __tablename__ = "statuses"

    id = Column(Integer, primary_key=True, index=True)
    description = Column(String(50), nullable=True)

    projects = relationship("Project", back_populates="status", passive_deletes="all")

    def __repr__(self):
        return f"<Status {self.id}: {self.description}>"
