from supabase import Client
from app.modules.travel_posts.schemas import TravelPostCreate, TravelPostUpdate, TravelPostResponse
from app.modules.activity.service import ActivityLogService
from app.core.errors import raise_store_error
from app.core.policies import Operation, Table, authorize, is_allowed, visible_rows
from app.core.session import SessionContext
from typing import List, Optional, Dict, Any
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

TABLE = Table.TRAVEL_POSTS


class TravelPostService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.activity = ActivityLogService(supabase)

    def _get_row(self, session: SessionContext, post_id: str) -> Dict[str, Any]:
        result = self.supabase.table(TABLE.value)\
            .select("*")\
            .eq("id", post_id)\
            .maybe_single()\
            .execute()
        if not result or not result.data or not is_allowed(session, TABLE, Operation.SELECT, result.data):
            raise HTTPException(status_code=404, detail="Travel post not found")
        return result.data

    def create_post(self, session: SessionContext, post_data: TravelPostCreate) -> TravelPostResponse:
        """Share a travel plan"""
        try:
            insert_data = {
                "user_id": session.user_id,
                "from_location": post_data.from_location.strip(),
                "to_location": post_data.to_location.strip(),
                "travel_date": post_data.travel_date.isoformat(),
                "travel_time": post_data.travel_time,
                "mode": post_data.mode,
            }
            authorize(session, TABLE, Operation.INSERT, insert_data)

            result = self.supabase.table(TABLE.value).insert(insert_data).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create travel post")

            post = result.data[0]
            self.activity.record(
                session.user_id, "create", "travel_post", post["id"],
                {"from": insert_data["from_location"], "to": insert_data["to_location"]}
            )
            logger.info(f"Travel post {post['id']} created by {session.user_id}")
            return TravelPostResponse(**post)
        except Exception as e:
            raise_store_error(e)

    def get_post(self, session: SessionContext, post_id: str) -> TravelPostResponse:
        """Get travel post by ID"""
        try:
            return TravelPostResponse(**self._get_row(session, post_id))
        except Exception as e:
            raise_store_error(e)

    def list_posts(
        self,
        session: SessionContext,
        mode: Optional[str] = None,
        limit: int = 10,
        offset: int = 0
    ) -> List[TravelPostResponse]:
        """All travel posts, newest first; not filtered by owner"""
        try:
            query = self.supabase.table(TABLE.value).select("*")
            if mode:
                query = query.eq("mode", mode)
            result = query.order("created_at", desc=True)\
                .limit(limit)\
                .offset(offset)\
                .execute()
            return [TravelPostResponse(**row) for row in visible_rows(session, TABLE, result.data or [])]
        except Exception as e:
            raise_store_error(e)

    def update_post(self, session: SessionContext, post_id: str, post_data: TravelPostUpdate) -> TravelPostResponse:
        """Update travel post (owner only)"""
        try:
            row = self._get_row(session, post_id)
            authorize(session, TABLE, Operation.UPDATE, row)

            update_data = post_data.model_dump(exclude_none=True, mode="json")
            if not update_data:
                return TravelPostResponse(**row)

            result = self.supabase.table(TABLE.value)\
                .update(update_data)\
                .eq("id", post_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Travel post not found")

            self.activity.record(session.user_id, "update", "travel_post", post_id, {"fields": sorted(update_data)})
            return TravelPostResponse(**result.data[0])
        except Exception as e:
            raise_store_error(e)

    def delete_post(self, session: SessionContext, post_id: str) -> bool:
        """Delete travel post (owner only)"""
        try:
            row = self._get_row(session, post_id)
            authorize(session, TABLE, Operation.DELETE, row)

            result = self.supabase.table(TABLE.value)\
                .delete()\
                .eq("id", post_id)\
                .execute()

            self.activity.record(session.user_id, "delete", "travel_post", post_id)
            return len(result.data or []) > 0
        except Exception as e:
            raise_store_error(e)
