from supabase import Client
from app.modules.errands.schemas import ErrandCreate, ErrandUpdate, ErrandResponse
from app.modules.activity.service import ActivityLogService
from app.core.errors import raise_store_error
from app.core.policies import Operation, Table, authorize, is_allowed, visible_rows
from app.core.session import SessionContext
from typing import List, Optional, Dict, Any
from fastapi import HTTPException
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

TABLE = Table.ERRAND_REQUESTS


class ErrandService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.activity = ActivityLogService(supabase)

    def _get_row(self, session: SessionContext, errand_id: str) -> Dict[str, Any]:
        result = self.supabase.table(TABLE.value)\
            .select("*")\
            .eq("id", errand_id)\
            .maybe_single()\
            .execute()
        if not result or not result.data or not is_allowed(session, TABLE, Operation.SELECT, result.data):
            raise HTTPException(status_code=404, detail="Errand request not found")
        return result.data

    def create_errand(self, session: SessionContext, errand_data: ErrandCreate) -> ErrandResponse:
        try:
            insert_data = {
                "user_id": session.user_id,
                "title": errand_data.title,
                "description": errand_data.description,
                "pickup_location": errand_data.pickup_location,
                "delivery_location": errand_data.delivery_location,
                "reward": errand_data.reward,
            }
            authorize(session, TABLE, Operation.INSERT, insert_data)

            result = self.supabase.table(TABLE.value).insert(insert_data).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create errand request")

            errand = result.data[0]
            self.activity.record(session.user_id, "create", "errand_request", errand["id"], {"title": errand_data.title})
            return ErrandResponse(**errand)
        except Exception as e:
            raise_store_error(e)

    def get_errand(self, session: SessionContext, errand_id: str) -> ErrandResponse:
        try:
            return ErrandResponse(**self._get_row(session, errand_id))
        except Exception as e:
            raise_store_error(e)

    def list_errands(
        self,
        session: SessionContext,
        status: Optional[str] = None,
        limit: int = 50,
        offset: int = 0
    ) -> List[ErrandResponse]:
        """Errands from everyone, newest first"""
        try:
            query = self.supabase.table(TABLE.value).select("*")
            if status:
                query = query.eq("status", status)
            result = query.order("created_at", desc=True)\
                .limit(limit)\
                .offset(offset)\
                .execute()
            return [ErrandResponse(**row) for row in visible_rows(session, TABLE, result.data or [])]
        except Exception as e:
            raise_store_error(e)

    def update_errand(self, session: SessionContext, errand_id: str, errand_data: ErrandUpdate) -> ErrandResponse:
        try:
            row = self._get_row(session, errand_id)
            authorize(session, TABLE, Operation.UPDATE, row)

            update_data = errand_data.model_dump(exclude_unset=True)
            if not update_data:
                return ErrandResponse(**row)

            result = self.supabase.table(TABLE.value)\
                .update(update_data)\
                .eq("id", errand_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Errand request not found")

            self.activity.record(session.user_id, "update", "errand_request", errand_id, {"fields": sorted(update_data)})
            return ErrandResponse(**result.data[0])
        except Exception as e:
            raise_store_error(e)

    def complete_errand(self, session: SessionContext, errand_id: str) -> ErrandResponse:
        """open -> completed.

        Governed by the owner-only UPDATE policy: a helper who is not the owner
        is refused, the owner may complete their own errand.
        """
        try:
            row = self._get_row(session, errand_id)
            authorize(session, TABLE, Operation.UPDATE, row)

            result = self.supabase.table(TABLE.value)\
                .update({
                    "status": "completed",
                    "completed_at": datetime.now(timezone.utc).isoformat(),
                    "completed_by": session.user_id,
                })\
                .eq("id", errand_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Errand request not found")

            self.activity.record(session.user_id, "complete", "errand_request", errand_id)
            return ErrandResponse(**result.data[0])
        except Exception as e:
            raise_store_error(e)

    def delete_errand(self, session: SessionContext, errand_id: str) -> bool:
        try:
            row = self._get_row(session, errand_id)
            authorize(session, TABLE, Operation.DELETE, row)

            result = self.supabase.table(TABLE.value)\
                .delete()\
                .eq("id", errand_id)\
                .execute()

            self.activity.record(session.user_id, "delete", "errand_request", errand_id)
            return len(result.data or []) > 0
        except Exception as e:
            raise_store_error(e)
