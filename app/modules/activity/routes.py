from fastapi import APIRouter, Depends, Query
from app.modules.activity.schemas import ActivityLogResponse
from app.modules.activity.service import ActivityLogService
from app.core.dependencies import get_caller_supabase, get_session_context
from app.core.session import SessionContext
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/activity", tags=["activity"])


def get_activity_service(supabase: Client = Depends(get_caller_supabase)) -> ActivityLogService:
    return ActivityLogService(supabase)


@router.get("", response_model=List[ActivityLogResponse])
async def list_activity(
    entity_type: Optional[str] = None,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    session: SessionContext = Depends(get_session_context),
    service: ActivityLogService = Depends(get_activity_service)
):
    """Caller's own activity; admins get the full log"""
    return service.list_activity(session, entity_type=entity_type, limit=limit, offset=offset)
