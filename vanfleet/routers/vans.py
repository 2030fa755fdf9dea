# vanfleet/routers/vans.py
"""Vans: list, search by plate, filter, get, create, update, delete (TABLA_VANS)."""

from typing import Annotated
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from vanfleet.database import get_db
from vanfleet.dependencies import require_session
from vanfleet.exceptions import NotFoundError
from vanfleet.schemas.common import CreatedOut, SuccessOut
from vanfleet.schemas.van import VanCreate, VanFilter, VanOut, VanSearch, VanUpdate
from vanfleet.services import van_service

router = APIRouter(prefix="/vans", dependencies=[Depends(require_session)])


@router.get("", response_model=list[VanOut], summary="List all vans, newest first")
def list_vans(db: Session = Depends(get_db)):
    return van_service.list_vans(db)


@router.get("/search", response_model=list[VanOut], summary="Search vans by plate")
def search_vans(search: Annotated[VanSearch, Query()], db: Session = Depends(get_db)):
    """Case-insensitive partial match on MATRICULA."""
    return van_service.search_vans(db, search.query)


@router.get("/filter", response_model=list[VanOut], summary="Filter vans")
def filter_vans(filters: Annotated[VanFilter, Query()], db: Session = Depends(get_db)):
    """All supplied predicates must match. No predicates returns the full list."""
    return van_service.filter_vans(db, filters)


@router.get("/{van_id}", response_model=VanOut, summary="Get a van by ID")
def get_van(van_id: int, db: Session = Depends(get_db)):
    van = van_service.get_van(db, van_id)
    if van is None:
        raise NotFoundError("Van", van_id)
    return van


@router.post("", response_model=CreatedOut, status_code=status.HTTP_201_CREATED, summary="Register a van")
def create_van(body: VanCreate, db: Session = Depends(get_db)):
    """VIN and MATRICULA are stored uppercase. Duplicates return 409."""
    van = van_service.create_van(db, body)
    return CreatedOut(id=van.id)


@router.patch("/{van_id}", response_model=SuccessOut, summary="Update some fields of a van")
def update_van(van_id: int, body: VanUpdate, db: Session = Depends(get_db)):
    van_service.update_van(db, van_id, body)
    return SuccessOut()


@router.delete("/{van_id}", response_model=SuccessOut, summary="Delete a van and its breakdowns")
def delete_van(van_id: int, db: Session = Depends(get_db)):
    van_service.delete_van(db, van_id)
    return SuccessOut()
