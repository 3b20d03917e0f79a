from supabase import Client
from app.modules.activity.schemas import ActivityLogResponse
from app.core.errors import raise_store_error
from app.core.policies import Table, visible_rows
from app.core.session import SessionContext
from typing import List, Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)


class ActivityLogService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def record(
        self,
        user_id: Optional[str],
        action_type: str,
        entity_type: str,
        entity_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> Optional[Dict[str, Any]]:
        """Append an activity entry. Failures are logged and ignored; the mutation that
        triggered the entry is never rolled back."""
        try:
            result = self.supabase.table(Table.ACTIVITY_LOGS.value).insert({
                "user_id": user_id,
                "action_type": action_type,
                "entity_type": entity_type,
                "entity_id": entity_id,
                "details": details
            }).execute()
            return result.data[0] if result.data else None
        except Exception as e:
            logger.warning(f"Activity log insert failed ({action_type} {entity_type} {entity_id}): {e}")
            return None

    def list_activity(
        self,
        session: SessionContext,
        entity_type: Optional[str] = None,
        limit: int = 50,
        offset: int = 0
    ) -> List[ActivityLogResponse]:
        """Own entries; admins see every entry"""
        try:
            query = self.supabase.table(Table.ACTIVITY_LOGS.value).select("*")
            if not session.is_admin:
                query = query.eq("user_id", session.user_id)
            if entity_type:
                query = query.eq("entity_type", entity_type)
            result = query.order("created_at", desc=True)\
                .limit(limit)\
                .offset(offset)\
                .execute()
            rows = visible_rows(session, Table.ACTIVITY_LOGS, result.data or [])
            return [ActivityLogResponse(**row) for row in rows]
        except Exception as e:
            raise_store_error(e)
