# vanfleet/services/metrics_service.py
"""
Dashboard metrics: point-in-time fleet health snapshot.

Loads every van and every breakdown once (two queries, no per-van lookups)
and derives the counts in memory. Nothing is cached: each call reflects the
current store state.

  ITV expiring soon : today <= FECHA_ITV <= today + ITV_WARNING_DAYS
  ITV expired       : FECHA_ITV < today
  In workshop       : breakdown records with no FECHA_SALIDA_TALLER
"""

from collections import Counter
from datetime import date, timedelta
from typing import Iterable, Optional
from sqlalchemy.orm import Session
from vanfleet.config import settings
from vanfleet.models.breakdown import Breakdown
from vanfleet.models.van import Van
from vanfleet.schemas.metrics import DashboardMetrics
from vanfleet.services.store import translate_store_errors
from vanfleet.utils.logger import get_logger

logger = get_logger(__name__, "METRICS")


def itv_status(itv_date: Optional[date], today: date, window_days: int = None) -> Optional[str]:
    """Returns "expired", "expiring" or None (valid beyond the window, or no date)."""
    if itv_date is None:
        return None
    window = timedelta(days=settings.ITV_WARNING_DAYS if window_days is None else window_days)
    if itv_date < today:
        return "expired"
    if itv_date <= today + window:
        return "expiring"
    return None


def summarize_fleet(vans: Iterable[Van], breakdowns: Iterable[Breakdown], today: date,
                    window_days: int = None) -> DashboardMetrics:
    vans = list(vans)
    active = sum(1 for v in vans if v.active)
    itv = Counter(itv_status(v.itv_date, today, window_days) for v in vans)

    return DashboardMetrics(
        total_vans=len(vans),
        active_vans=active,
        inactive_vans=len(vans) - active,
        vans_with_breakdown=sum(1 for v in vans if v.has_breakdown),
        itv_expiring_vans=itv["expiring"],
        itv_expired_vans=itv["expired"],
        vans_in_workshop=sum(1 for b in breakdowns if b.workshop_exit_date is None),
        company_counts=dict(Counter(v.company for v in vans)),
        type_counts=dict(Counter(v.van_type for v in vans)),
    )


def get_dashboard(db: Session, today: date = None) -> DashboardMetrics:
    with translate_store_errors(db, "fetch metrics"):
        vans = db.query(Van).all()
        breakdowns = db.query(Breakdown).all()

    metrics = summarize_fleet(vans, breakdowns, today or date.today())
    logger.debug(
        f"total={metrics.total_vans} itv_expired={metrics.itv_expired_vans} "
        f"in_workshop={metrics.vans_in_workshop}"
    )
    return metrics
