from fastapi import APIRouter, Depends
from app.modules.roles.schemas import UserRoleResponse
from app.modules.roles.service import RoleService
from app.core.dependencies import get_caller_supabase, get_session_context
from app.core.session import SessionContext
from supabase import Client
from typing import List

router = APIRouter(prefix="/roles", tags=["roles"])


def get_role_service(supabase: Client = Depends(get_caller_supabase)) -> RoleService:
    return RoleService(supabase)


# No grant/revoke routes: user_roles has no client-facing write policies.
@router.get("/me", response_model=List[UserRoleResponse])
async def list_my_roles(
    session: SessionContext = Depends(get_session_context),
    service: RoleService = Depends(get_role_service)
):
    """Roles held by the current user"""
    return service.list_own_roles(session)
