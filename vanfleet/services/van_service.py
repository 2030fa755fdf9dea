# vanfleet/services/van_service.py
"""
Van persistence: listing, lookup, plate search, predicate filtering and CRUD.
The only module (with breakdown_service) that queries TABLA_VANS.
"""

from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session
from vanfleet.exceptions import ConflictError, NotFoundError
from vanfleet.models.van import Van
from vanfleet.schemas.van import VanCreate, VanFilter, VanUpdate
from vanfleet.services.store import translate_store_errors
from vanfleet.utils.logger import get_logger

logger = get_logger(__name__, "VANS")

NEWEST_FIRST = (Van.created_at.desc(), Van.id.desc())


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def list_vans(db: Session) -> list[Van]:
    with translate_store_errors(db, "fetch vans"):
        return db.query(Van).order_by(*NEWEST_FIRST).all()


def get_van(db: Session, van_id: int) -> Optional[Van]:
    """Returns None if the van does not exist."""
    with translate_store_errors(db, "fetch van"):
        return db.query(Van).filter(Van.id == van_id).first()


def search_vans(db: Session, query: str) -> list[Van]:
    """Case-insensitive substring match on the plate (MATRICULA)."""
    pattern = f"%{_escape_like(query)}%"
    with translate_store_errors(db, "search vans"):
        return (
            db.query(Van)
            .filter(Van.matricula.ilike(pattern, escape="\\"))
            .order_by(*NEWEST_FIRST)
            .all()
        )


def filter_vans(db: Session, filters: VanFilter) -> list[Van]:
    q = db.query(Van)
    if filters.company is not None:
        q = q.filter(Van.company == filters.company)
    if filters.state is not None:
        q = q.filter(Van.state == filters.state)
    if filters.active is not None:
        q = q.filter(Van.active == filters.active)
    if filters.has_breakdown is not None:
        q = q.filter(Van.has_breakdown == filters.has_breakdown)
    if filters.itv_valid is not None:
        q = q.filter(Van.itv_valid == filters.itv_valid)
    with translate_store_errors(db, "filter vans"):
        return q.order_by(*NEWEST_FIRST).all()


def create_van(db: Session, data: VanCreate) -> Van:
    """Insert a van. Raises ConflictError if the VIN or plate is already registered."""
    van = Van(**data.model_dump())
    with translate_store_errors(db, "create van", on_integrity_error=ConflictError):
        db.add(van)
        db.commit()
    logger.info(f"Created van {van.id} plate={van.matricula} vin={van.vin}")
    return van


def update_van(db: Session, van_id: int, data: VanUpdate) -> Van:
    """Write only the supplied fields and stamp updatedAt."""
    van = get_van(db, van_id)
    if van is None:
        raise NotFoundError("Van", van_id)

    changes = data.model_dump(exclude_unset=True)
    with translate_store_errors(db, "update van", on_integrity_error=ConflictError):
        for field, value in changes.items():
            setattr(van, field, value)
        van.updated_at = datetime.utcnow()
        db.commit()
    logger.info(f"Updated van {van_id} fields={sorted(changes)}")
    return van


def delete_van(db: Session, van_id: int):
    """Delete a van and, through the cascade, its whole breakdown history."""
    van = get_van(db, van_id)
    if van is None:
        raise NotFoundError("Van", van_id)

    with translate_store_errors(db, "delete van"):
        db.delete(van)
        db.commit()
    logger.info(f"Deleted van {van_id} plate={van.matricula}")
