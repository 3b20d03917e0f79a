"""
Core dependencies for route protection and session resolution
"""

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.database.supabase_client import SupabaseClient, get_auth_supabase, get_service_supabase
from app.modules.auth.service import AuthService
from app.core.policies import get_user_roles, has_role
from app.core.session import SessionContext
from supabase import Client
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer()


def get_auth_service(
    supabase: Client = Depends(get_auth_supabase),
    service_supabase: Client = Depends(get_service_supabase)
) -> AuthService:
    return AuthService(supabase, service_supabase)


def get_session_context(
    credentials: HTTPAuthorizationCredentials = Security(security),
    auth_service: AuthService = Depends(get_auth_service),
    service_supabase: Client = Depends(get_service_supabase)
) -> SessionContext:
    """Resolve the caller once per request: identity from the JWT, roles from user_roles"""
    token = credentials.credentials
    user_data = auth_service.get_current_user(token)
    try:
        roles = get_user_roles(user_data["id"], service_supabase)
    except Exception as e:
        logger.error(f"Error loading roles for {user_data['id']}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not load user roles"
        )
    return SessionContext(
        user_id=user_data["id"],
        email=user_data.get("email"),
        access_token=token,
        roles=frozenset(roles),
        user_metadata=user_data.get("user_metadata", {}),
    )


def get_caller_supabase(
    session: SessionContext = Depends(get_session_context)
) -> Client:
    """Supabase client acting as the caller, so the store applies RLS for them"""
    return SupabaseClient.for_user(session.access_token)


def require_role(required_role: str):
    """Factory function to create role check dependency. Reads user_roles through has_role on every call."""
    def check_role(
        session: SessionContext = Depends(get_session_context),
        service_supabase: Client = Depends(get_service_supabase)
    ) -> SessionContext:
        try:
            allowed = has_role(session.user_id, required_role, service_supabase)
        except Exception as e:
            logger.error(f"Error checking role {required_role} for {session.user_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Could not load user roles"
            )
        if not allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Insufficient role. Required: {required_role}"
            )
        return session
    return check_role
