"""
Reference data lookups (statuses and craft types)
"""
from typing import List

from sqlalchemy.orm import Session

from craftlib.models import CraftType, Status


def list_statuses(db: Session) -> List[Status]:
    return db.query(Status).order_by(Status.id).all()


def list_craft_types(db: Session) -> List[CraftType]:
    return db.query(CraftType).order_by(CraftType.id).all()

