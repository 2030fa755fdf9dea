# vanfleet/schemas/metrics.py
from pydantic import BaseModel


class DashboardMetrics(BaseModel):
    total_vans: int
    active_vans: int
    inactive_vans: int
    vans_with_breakdown: int     # stored AVERIA flag
    itv_expiring_vans: int
    itv_expired_vans: int
    vans_in_workshop: int        # open breakdown records (no exit date)
    company_counts: dict[str, int]
    type_counts: dict[str, int]
