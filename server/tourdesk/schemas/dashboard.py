"""Dashboard statistics schema."""

from pydantic import Field

from .common import CamelModel, SignedMoney


class DashboardStats(CamelModel):
    """Figures shown on the dashboard cards."""

    active_tours: int = Field(..., ge=0, description="Tours with status active")
    total_tourists: int = Field(..., ge=0, description="All registered tourists")
    # Totals may exceed the per-record digit limit
    total_revenue: SignedMoney = Field(..., ge=0, description="Sum of income transactions")
    net_profit: SignedMoney = Field(..., description="Revenue minus expenses")
