from fastapi import APIRouter, Depends
from app.modules.profiles.schemas import ProfileUpdate, ProfileResponse
from app.modules.profiles.service import ProfileService
from app.core.dependencies import get_caller_supabase, get_session_context
from app.core.session import SessionContext
from supabase import Client

router = APIRouter(prefix="/profiles", tags=["profiles"])


def get_profile_service(supabase: Client = Depends(get_caller_supabase)) -> ProfileService:
    return ProfileService(supabase)


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    session: SessionContext = Depends(get_session_context),
    service: ProfileService = Depends(get_profile_service)
):
    """Get the current user's profile"""
    return service.get_own_profile(session)


@router.put("/me", response_model=ProfileResponse)
async def update_my_profile(
    profile_data: ProfileUpdate,
    session: SessionContext = Depends(get_session_context),
    service: ProfileService = Depends(get_profile_service)
):
    """Update the current user's profile"""
    return service.update_own_profile(session, profile_data)
