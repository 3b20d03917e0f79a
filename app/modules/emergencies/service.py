from supabase import Client
from app.modules.emergencies.schemas import EmergencyCreate, EmergencyResponse, EmergencyDashboardResponse
from app.modules.activity.service import ActivityLogService
from app.core.errors import raise_store_error
from app.core.policies import Operation, Table, authorize, is_allowed, visible_rows
from app.core.session import SessionContext
from typing import List, Optional, Dict, Any
from fastapi import HTTPException
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

TABLE = Table.EMERGENCY_REQUESTS


class EmergencyService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.activity = ActivityLogService(supabase)

    def _get_row(self, session: SessionContext, emergency_id: str) -> Dict[str, Any]:
        result = self.supabase.table(TABLE.value)\
            .select("*")\
            .eq("id", emergency_id)\
            .maybe_single()\
            .execute()
        if not result or not result.data or not is_allowed(session, TABLE, Operation.SELECT, result.data):
            raise HTTPException(status_code=404, detail="Emergency request not found")
        return result.data

    def create_emergency(self, session: SessionContext, emergency_data: EmergencyCreate) -> EmergencyResponse:
        """Raise an emergency request; always starts open"""
        try:
            insert_data = {
                "user_id": session.user_id,
                "reason": emergency_data.reason,
                "location": emergency_data.location.strip(),
                "status": "open",
            }
            authorize(session, TABLE, Operation.INSERT, insert_data)

            result = self.supabase.table(TABLE.value).insert(insert_data).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to submit emergency request")

            emergency = result.data[0]
            self.activity.record(
                session.user_id, "create", "emergency_request", emergency["id"],
                {"reason": insert_data["reason"], "location": insert_data["location"]}
            )
            logger.warning(f"Emergency {emergency['id']} ({insert_data['reason']}) raised by {session.user_id}")
            return EmergencyResponse(**emergency)
        except Exception as e:
            raise_store_error(e)

    def get_emergency(self, session: SessionContext, emergency_id: str) -> EmergencyResponse:
        try:
            return EmergencyResponse(**self._get_row(session, emergency_id))
        except Exception as e:
            raise_store_error(e)

    def list_emergencies(
        self,
        session: SessionContext,
        status: Optional[str] = None,
        limit: int = 50,
        offset: int = 0
    ) -> List[EmergencyResponse]:
        """Own requests; admins see every request. Newest first."""
        try:
            query = self.supabase.table(TABLE.value).select("*")
            if not session.is_admin:
                query = query.eq("user_id", session.user_id)
            if status:
                query = query.eq("status", status)
            result = query.order("created_at", desc=True)\
                .limit(limit)\
                .offset(offset)\
                .execute()
            return [EmergencyResponse(**row) for row in visible_rows(session, TABLE, result.data or [])]
        except Exception as e:
            raise_store_error(e)

    def get_dashboard(self, session: SessionContext) -> EmergencyDashboardResponse:
        """Admin triage view: the latest requests plus the number still open"""
        emergencies = self.list_emergencies(session, limit=200)
        try:
            result = self.supabase.table(TABLE.value)\
                .select("id", count="exact")\
                .eq("status", "open")\
                .execute()
            open_count = result.count if result.count is not None else len(result.data or [])
        except Exception as e:
            raise_store_error(e)
        return EmergencyDashboardResponse(open_count=open_count, emergencies=emergencies)

    def resolve_emergency(self, session: SessionContext, emergency_id: str) -> EmergencyResponse:
        """open -> resolved (admin only).

        Not a compare-and-swap: resolving an already resolved request succeeds
        and overwrites resolved_at/resolved_by.
        """
        try:
            row = self._get_row(session, emergency_id)
            authorize(session, TABLE, Operation.UPDATE, row)

            result = self.supabase.table(TABLE.value)\
                .update({
                    "status": "resolved",
                    "resolved_at": datetime.now(timezone.utc).isoformat(),
                    "resolved_by": session.user_id,
                })\
                .eq("id", emergency_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Emergency request not found")

            self.activity.record(session.user_id, "resolve", "emergency_request", emergency_id)
            logger.info(f"Emergency {emergency_id} resolved by {session.user_id}")
            return EmergencyResponse(**result.data[0])
        except Exception as e:
            raise_store_error(e)

    def delete_emergency(self, session: SessionContext, emergency_id: str) -> bool:
        """Delete emergency request (admin only)"""
        try:
            row = self._get_row(session, emergency_id)
            authorize(session, TABLE, Operation.DELETE, row)

            result = self.supabase.table(TABLE.value)\
                .delete()\
                .eq("id", emergency_id)\
                .execute()

            self.activity.record(session.user_id, "delete", "emergency_request", emergency_id)
            return len(result.data or []) > 0
        except Exception as e:
            raise_store_error(e)
