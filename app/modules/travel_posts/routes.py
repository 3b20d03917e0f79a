from fastapi import APIRouter, Depends, Query
from app.modules.travel_posts.schemas import TravelPostCreate, TravelPostUpdate, TravelPostResponse, TravelMode
from app.modules.travel_posts.service import TravelPostService
from app.core.dependencies import get_caller_supabase, get_session_context
from app.core.session import SessionContext
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/travel-posts", tags=["travel-posts"])


def get_travel_post_service(supabase: Client = Depends(get_caller_supabase)) -> TravelPostService:
    return TravelPostService(supabase)


@router.post("", response_model=TravelPostResponse, status_code=201)
async def create_travel_post(
    post_data: TravelPostCreate,
    session: SessionContext = Depends(get_session_context),
    service: TravelPostService = Depends(get_travel_post_service)
):
    """Post a travel plan"""
    return service.create_post(session, post_data)


@router.get("", response_model=List[TravelPostResponse])
async def list_travel_posts(
    mode: Optional[TravelMode] = None,
    limit: int = Query(10, ge=1, le=200),
    offset: int = Query(0, ge=0),
    session: SessionContext = Depends(get_session_context),
    service: TravelPostService = Depends(get_travel_post_service)
):
    """List travel posts from everyone, newest first"""
    return service.list_posts(session, mode=mode, limit=limit, offset=offset)


@router.get("/{post_id}", response_model=TravelPostResponse)
async def get_travel_post(
    post_id: str,
    session: SessionContext = Depends(get_session_context),
    service: TravelPostService = Depends(get_travel_post_service)
):
    return service.get_post(session, post_id)


@router.put("/{post_id}", response_model=TravelPostResponse)
async def update_travel_post(
    post_id: str,
    post_data: TravelPostUpdate,
    session: SessionContext = Depends(get_session_context),
    service: TravelPostService = Depends(get_travel_post_service)
):
    """Update a travel post (owner only)"""
    return service.update_post(session, post_id, post_data)


@router.delete("/{post_id}", status_code=204)
async def delete_travel_post(
    post_id: str,
    session: SessionContext = Depends(get_session_context),
    service: TravelPostService = Depends(get_travel_post_service)
):
    """Delete a travel post (owner only)"""
    service.delete_post(session, post_id)
    return None
