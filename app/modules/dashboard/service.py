from supabase import Client
from app.modules.dashboard.schemas import DashboardResponse
from app.modules.travel_posts.service import TravelPostService
from app.core.errors import raise_store_error
from app.core.policies import Table
from app.core.session import SessionContext
from app.config import settings


class DashboardService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.travel_posts = TravelPostService(supabase)

    def _count(self, table: Table, column: str, value: str) -> int:
        result = self.supabase.table(table.value)\
            .select("id", count="exact")\
            .eq(column, value)\
            .execute()
        if result.count is not None:
            return result.count
        return len(result.data or [])

    def get_dashboard(self, session: SessionContext) -> DashboardResponse:
        recent = self.travel_posts.list_posts(session, limit=settings.dashboard_recent_limit)
        try:
            return DashboardResponse(
                recent_travel_posts=recent,
                open_errands=self._count(Table.ERRAND_REQUESTS, "status", "open"),
                active_carpools=self._count(Table.CARPOOL_RIDES, "status", "active"),
                is_admin=session.is_admin,
                open_emergencies=self._count(Table.EMERGENCY_REQUESTS, "status", "open") if session.is_admin else None,
            )
        except Exception as e:
            raise_store_error(e)
