from fastapi import APIRouter, Depends, Query
from app.modules.emergencies.schemas import EmergencyCreate, EmergencyResponse, EmergencyDashboardResponse, EmergencyStatus
from app.modules.emergencies.service import EmergencyService
from app.core.dependencies import get_caller_supabase, get_session_context, require_role
from app.core.session import ADMIN_ROLE, SessionContext
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/emergencies", tags=["emergencies"])


def get_emergency_service(supabase: Client = Depends(get_caller_supabase)) -> EmergencyService:
    return EmergencyService(supabase)


@router.post("", response_model=EmergencyResponse, status_code=201)
async def create_emergency(
    emergency_data: EmergencyCreate,
    session: SessionContext = Depends(get_session_context),
    service: EmergencyService = Depends(get_emergency_service)
):
    """Request emergency help"""
    return service.create_emergency(session, emergency_data)


@router.get("", response_model=List[EmergencyResponse])
async def list_emergencies(
    status: Optional[EmergencyStatus] = None,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    session: SessionContext = Depends(get_session_context),
    service: EmergencyService = Depends(get_emergency_service)
):
    """List own emergency requests (all requests for admins)"""
    return service.list_emergencies(session, status=status, limit=limit, offset=offset)


@router.get("/dashboard", response_model=EmergencyDashboardResponse)
async def emergency_dashboard(
    session: SessionContext = Depends(require_role(ADMIN_ROLE)),
    service: EmergencyService = Depends(get_emergency_service)
):
    """Admin triage dashboard"""
    return service.get_dashboard(session)


@router.get("/{emergency_id}", response_model=EmergencyResponse)
async def get_emergency(
    emergency_id: str,
    session: SessionContext = Depends(get_session_context),
    service: EmergencyService = Depends(get_emergency_service)
):
    return service.get_emergency(session, emergency_id)


@router.post("/{emergency_id}/resolve", response_model=EmergencyResponse)
async def resolve_emergency(
    emergency_id: str,
    session: SessionContext = Depends(get_session_context),
    service: EmergencyService = Depends(get_emergency_service)
):
    """Mark an emergency request resolved (admin only)"""
    return service.resolve_emergency(session, emergency_id)


@router.delete("/{emergency_id}", status_code=204)
async def delete_emergency(
    emergency_id: str,
    session: SessionContext = Depends(get_session_context),
    service: EmergencyService = Depends(get_emergency_service)
):
    """Delete an emergency request (admin only)"""
    service.delete_emergency(session, emergency_id)
    return None
