from fastapi import APIRouter, Depends
from app.modules.dashboard.schemas import DashboardResponse
from app.modules.dashboard.service import DashboardService
from app.core.dependencies import get_caller_supabase, get_session_context
from app.core.session import SessionContext
from supabase import Client

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def get_dashboard_service(supabase: Client = Depends(get_caller_supabase)) -> DashboardService:
    return DashboardService(supabase)


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    session: SessionContext = Depends(get_session_context),
    service: DashboardService = Depends(get_dashboard_service)
):
    """Landing page data: latest travel posts and open work"""
    return service.get_dashboard(session)
