from supabase import Client
from app.modules.roles.schemas import UserRoleResponse
from app.core.errors import raise_store_error
from app.core.policies import Table, visible_rows
from app.core.session import APP_ROLES, SessionContext
from typing import List
import logging

logger = logging.getLogger(__name__)


class RoleService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_own_roles(self, session: SessionContext) -> List[UserRoleResponse]:
        """Role assignments held by the caller"""
        try:
            result = self.supabase.table(Table.USER_ROLES.value)\
                .select("*")\
                .eq("user_id", session.user_id)\
                .order("created_at")\
                .execute()
            rows = visible_rows(session, Table.USER_ROLES, result.data or [])
            return [UserRoleResponse(**row) for row in rows]
        except Exception as e:
            raise_store_error(e)


class RoleAdminService:
    """Operator-side role management. Requires the service-role client; never wired to a route."""

    def __init__(self, service_supabase: Client):
        self.supabase = service_supabase

    def grant(self, user_id: str, role: str) -> bool:
        """Grant `role`; returns False when the user already holds it"""
        if role not in APP_ROLES:
            raise ValueError(f"Unknown role: {role}")
        existing = self.supabase.table(Table.USER_ROLES.value)\
            .select("id")\
            .eq("user_id", user_id)\
            .eq("role", role)\
            .execute()
        if existing.data:
            return False
        self.supabase.table(Table.USER_ROLES.value).insert({
            "user_id": user_id,
            "role": role
        }).execute()
        logger.info(f"Granted role {role} to {user_id}")
        return True

    def revoke(self, user_id: str, role: str) -> bool:
        """Revoke `role`; returns False when the user did not hold it"""
        if role not in APP_ROLES:
            raise ValueError(f"Unknown role: {role}")
        result = self.supabase.table(Table.USER_ROLES.value)\
            .delete()\
            .eq("user_id", user_id)\
            .eq("role", role)\
            .execute()
        removed = bool(result.data)
        if removed:
            logger.info(f"Revoked role {role} from {user_id}")
        return removed
