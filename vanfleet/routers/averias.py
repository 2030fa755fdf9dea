# vanfleet/routers/averias.py
"""Averías: breakdown / maintenance records of the vans (VANS_AVERIAS)."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from vanfleet.database import get_db
from vanfleet.dependencies import require_session
from vanfleet.exceptions import NotFoundError
from vanfleet.schemas.breakdown import BreakdownCreate, BreakdownOut, BreakdownUpdate
from vanfleet.schemas.common import CreatedOut, SuccessOut
from vanfleet.services import breakdown_service

router = APIRouter(prefix="/averias", dependencies=[Depends(require_session)])


@router.get("", response_model=list[BreakdownOut], summary="List all breakdowns, newest first")
def list_breakdowns(db: Session = Depends(get_db)):
    return breakdown_service.list_breakdowns(db)


@router.get("/van/{van_id}", response_model=list[BreakdownOut], summary="Maintenance history of a van")
def list_breakdowns_for_van(van_id: int, db: Session = Depends(get_db)):
    return breakdown_service.list_breakdowns_for_van(db, van_id)


@router.get("/{breakdown_id}", response_model=BreakdownOut, summary="Get a breakdown by ID")
def get_breakdown(breakdown_id: int, db: Session = Depends(get_db)):
    breakdown = breakdown_service.get_breakdown(db, breakdown_id)
    if breakdown is None:
        raise NotFoundError("Breakdown", breakdown_id)
    return breakdown


@router.post("", response_model=CreatedOut, status_code=status.HTTP_201_CREATED, summary="Record a breakdown")
def create_breakdown(body: BreakdownCreate, db: Session = Depends(get_db)):
    """The van must exist, otherwise 404 and nothing is written."""
    breakdown = breakdown_service.create_breakdown(db, body)
    return CreatedOut(id=breakdown.id)


@router.patch("/{breakdown_id}", response_model=SuccessOut, summary="Update some fields of a breakdown")
def update_breakdown(breakdown_id: int, body: BreakdownUpdate, db: Session = Depends(get_db)):
    """Set workshop_exit_date to close the breakdown."""
    breakdown_service.update_breakdown(db, breakdown_id, body)
    return SuccessOut()


@router.delete("/{breakdown_id}", response_model=SuccessOut, summary="Delete a breakdown")
def delete_breakdown(breakdown_id: int, db: Session = Depends(get_db)):
    breakdown_service.delete_breakdown(db, breakdown_id)
    return SuccessOut()
