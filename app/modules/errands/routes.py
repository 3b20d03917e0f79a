from fastapi import APIRouter, Depends, Query
from app.modules.errands.schemas import ErrandCreate, ErrandUpdate, ErrandResponse, ErrandStatus
from app.modules.errands.service import ErrandService
from app.core.dependencies import get_caller_supabase, get_session_context
from app.core.session import SessionContext
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/errands", tags=["errands"])


def get_errand_service(supabase: Client = Depends(get_caller_supabase)) -> ErrandService:
    return ErrandService(supabase)


@router.post("", response_model=ErrandResponse, status_code=201)
async def create_errand(
    errand_data: ErrandCreate,
    session: SessionContext = Depends(get_session_context),
    service: ErrandService = Depends(get_errand_service)
):
    """Request an item or errand"""
    return service.create_errand(session, errand_data)


@router.get("", response_model=List[ErrandResponse])
async def list_errands(
    status: Optional[ErrandStatus] = None,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    session: SessionContext = Depends(get_session_context),
    service: ErrandService = Depends(get_errand_service)
):
    return service.list_errands(session, status=status, limit=limit, offset=offset)


@router.get("/{errand_id}", response_model=ErrandResponse)
async def get_errand(
    errand_id: str,
    session: SessionContext = Depends(get_session_context),
    service: ErrandService = Depends(get_errand_service)
):
    return service.get_errand(session, errand_id)


@router.put("/{errand_id}", response_model=ErrandResponse)
async def update_errand(
    errand_id: str,
    errand_data: ErrandUpdate,
    session: SessionContext = Depends(get_session_context),
    service: ErrandService = Depends(get_errand_service)
):
    """Update an errand (owner only)"""
    return service.update_errand(session, errand_id, errand_data)


@router.post("/{errand_id}/complete", response_model=ErrandResponse)
async def complete_errand(
    errand_id: str,
    session: SessionContext = Depends(get_session_context),
    service: ErrandService = Depends(get_errand_service)
):
    """Mark an errand completed"""
    return service.complete_errand(session, errand_id)


@router.delete("/{errand_id}", status_code=204)
async def delete_errand(
    errand_id: str,
    session: SessionContext = Depends(get_session_context),
    service: ErrandService = Depends(get_errand_service)
):
    """Delete an errand (owner only)"""
    service.delete_errand(session, errand_id)
    return None
