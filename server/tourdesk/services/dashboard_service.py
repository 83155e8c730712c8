"""Dashboard service exposing aggregate statistics."""

from ..core.aggregation import DashboardSnapshot
from ..core.observability import get_logger, metrics_collector
from ..core.storage import EntityStore

logger = get_logger(__name__)


class DashboardService:
    """Service for dashboard figures; recomputed on every call."""

    def __init__(self, store: EntityStore):
        self.store = store

    def get_stats(self) -> DashboardSnapshot:
        snapshot = self.store.dashboard_stats()
        metrics_collector.set_dashboard_gauges(snapshot.active_tours, snapshot.total_tourists)

        logger.debug(
            "dashboard_stats_computed",
            active_tours=snapshot.active_tours,
            total_tourists=snapshot.total_tourists,
            total_revenue=str(snapshot.total_revenue),
            net_profit=str(snapshot.net_profit),
        )
        return snapshot
