# vanfleet/services/breakdown_service.py
"""
Breakdown (avería) persistence.
A breakdown always belongs to an existing van: create_breakdown looks the van
up first so a missing van is reported as NotFound rather than as a foreign-key
failure. The lookup and the insert are not one transaction; if the van is
deleted in between, the FK constraint rejects the insert and that is also
reported as NotFound.
"""

from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session
from vanfleet.exceptions import NotFoundError
from vanfleet.models.breakdown import Breakdown
from vanfleet.schemas.breakdown import BreakdownCreate, BreakdownUpdate
from vanfleet.services.store import translate_store_errors
from vanfleet.services.van_service import get_van
from vanfleet.utils.logger import get_logger

logger = get_logger(__name__, "AVERIAS")

NEWEST_FIRST = (Breakdown.created_at.desc(), Breakdown.id.desc())


def list_breakdowns(db: Session) -> list[Breakdown]:
    with translate_store_errors(db, "fetch breakdowns"):
        return db.query(Breakdown).order_by(*NEWEST_FIRST).all()


def get_breakdown(db: Session, breakdown_id: int) -> Optional[Breakdown]:
    """Returns None if the breakdown does not exist."""
    with translate_store_errors(db, "fetch breakdown"):
        return db.query(Breakdown).filter(Breakdown.id == breakdown_id).first()


def list_breakdowns_for_van(db: Session, van_id: int) -> list[Breakdown]:
    """Maintenance history of a van, newest first. Empty for unknown vans."""
    with translate_store_errors(db, "fetch breakdowns"):
        return (
            db.query(Breakdown)
            .filter(Breakdown.van_id == van_id)
            .order_by(*NEWEST_FIRST)
            .all()
        )


def create_breakdown(db: Session, data: BreakdownCreate) -> Breakdown:
    if get_van(db, data.van_id) is None:
        raise NotFoundError("Van", data.van_id)

    breakdown = Breakdown(**data.model_dump())
    with translate_store_errors(db, "create breakdown", on_integrity_error=lambda: NotFoundError("Van", data.van_id)):
        db.add(breakdown)
        db.commit()
    logger.info(f"Created breakdown {breakdown.id} for van {breakdown.van_id}: {breakdown.cause[:60]}")
    return breakdown


def update_breakdown(db: Session, breakdown_id: int, data: BreakdownUpdate) -> Breakdown:
    breakdown = get_breakdown(db, breakdown_id)
    if breakdown is None:
        raise NotFoundError("Breakdown", breakdown_id)

    changes = data.model_dump(exclude_unset=True)
    with translate_store_errors(db, "update breakdown"):
        for field, value in changes.items():
            setattr(breakdown, field, value)
        breakdown.updated_at = datetime.utcnow()
        db.commit()
    logger.info(f"Updated breakdown {breakdown_id} fields={sorted(changes)}")
    return breakdown


def delete_breakdown(db: Session, breakdown_id: int):
    breakdown = get_breakdown(db, breakdown_id)
    if breakdown is None:
        raise NotFoundError("Breakdown", breakdown_id)

    with translate_store_errors(db, "delete breakdown"):
        db.delete(breakdown)
        db.commit()
    logger.info(f"Deleted breakdown {breakdown_id} (van {breakdown.van_id})")
