from fastapi import APIRouter, Depends, Query
from app.modules.carpools.schemas import CarpoolCreate, CarpoolUpdate, CarpoolResponse, CarpoolStatus
from app.modules.carpools.service import CarpoolService
from app.core.dependencies import get_caller_supabase, get_session_context
from app.core.session import SessionContext
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/carpools", tags=["carpools"])


def get_carpool_service(supabase: Client = Depends(get_caller_supabase)) -> CarpoolService:
    return CarpoolService(supabase)


@router.post("", response_model=CarpoolResponse, status_code=201)
async def create_carpool(
    ride_data: CarpoolCreate,
    session: SessionContext = Depends(get_session_context),
    service: CarpoolService = Depends(get_carpool_service)
):
    """Offer a carpool ride"""
    return service.create_ride(session, ride_data)


@router.get("", response_model=List[CarpoolResponse])
async def list_carpools(
    status: Optional[CarpoolStatus] = None,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    session: SessionContext = Depends(get_session_context),
    service: CarpoolService = Depends(get_carpool_service)
):
    return service.list_rides(session, status=status, limit=limit, offset=offset)


@router.get("/{ride_id}", response_model=CarpoolResponse)
async def get_carpool(
    ride_id: str,
    session: SessionContext = Depends(get_session_context),
    service: CarpoolService = Depends(get_carpool_service)
):
    return service.get_ride(session, ride_id)


@router.put("/{ride_id}", response_model=CarpoolResponse)
async def update_carpool(
    ride_id: str,
    ride_data: CarpoolUpdate,
    session: SessionContext = Depends(get_session_context),
    service: CarpoolService = Depends(get_carpool_service)
):
    """Update a ride (driver only)"""
    return service.update_ride(session, ride_id, ride_data)


@router.post("/{ride_id}/complete", response_model=CarpoolResponse)
async def complete_carpool(
    ride_id: str,
    session: SessionContext = Depends(get_session_context),
    service: CarpoolService = Depends(get_carpool_service)
):
    """Mark a ride completed (driver only)"""
    return service.complete_ride(session, ride_id)


@router.delete("/{ride_id}", status_code=204)
async def delete_carpool(
    ride_id: str,
    session: SessionContext = Depends(get_session_context),
    service: CarpoolService = Depends(get_carpool_service)
):
    """Delete a ride (driver only)"""
    service.delete_ride(session, ride_id)
    return None
