# vanfleet/routers/metrics.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from vanfleet.database import get_db
from vanfleet.dependencies import require_session
from vanfleet.schemas.metrics import DashboardMetrics
from vanfleet.services import metrics_service

router = APIRouter(prefix="/metrics", dependencies=[Depends(require_session)])


@router.get("/dashboard", response_model=DashboardMetrics, summary="Fleet health snapshot")
def get_dashboard(db: Session = Depends(get_db)):
    """Totals, ITV expiry windows, vans in workshop and per-company / per-type counts."""
    return metrics_service.get_dashboard(db)
