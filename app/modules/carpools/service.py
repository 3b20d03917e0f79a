from supabase import Client
from app.modules.carpools.schemas import CarpoolCreate, CarpoolUpdate, CarpoolResponse
from app.modules.activity.service import ActivityLogService
from app.core.errors import raise_store_error
from app.core.policies import Operation, Table, authorize, is_allowed, visible_rows
from app.core.session import SessionContext
from typing import List, Optional, Dict, Any
from fastapi import HTTPException
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

TABLE = Table.CARPOOL_RIDES


class CarpoolService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.activity = ActivityLogService(supabase)

    def _get_row(self, session: SessionContext, ride_id: str) -> Dict[str, Any]:
        result = self.supabase.table(TABLE.value)\
            .select("*")\
            .eq("id", ride_id)\
            .maybe_single()\
            .execute()
        if not result or not result.data or not is_allowed(session, TABLE, Operation.SELECT, result.data):
            raise HTTPException(status_code=404, detail="Carpool ride not found")
        return result.data

    def create_ride(self, session: SessionContext, ride_data: CarpoolCreate) -> CarpoolResponse:
        """Offer a carpool ride"""
        try:
            insert_data = {
                "driver_id": session.user_id,
                "from_location": ride_data.from_location.strip(),
                "to_location": ride_data.to_location.strip(),
                "departure_date": ride_data.departure_date.isoformat(),
                "departure_time": ride_data.departure_time,
                "seats_available": ride_data.seats_available,
                "price_per_seat": ride_data.price_per_seat,
                "notes": (ride_data.notes or "").strip() or None,
            }
            authorize(session, TABLE, Operation.INSERT, insert_data)

            result = self.supabase.table(TABLE.value).insert(insert_data).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create carpool ride")

            ride = result.data[0]
            self.activity.record(
                session.user_id, "create", "carpool_ride", ride["id"],
                {"from": insert_data["from_location"], "to": insert_data["to_location"]}
            )
            return CarpoolResponse(**ride)
        except Exception as e:
            raise_store_error(e)

    def get_ride(self, session: SessionContext, ride_id: str) -> CarpoolResponse:
        try:
            return CarpoolResponse(**self._get_row(session, ride_id))
        except Exception as e:
            raise_store_error(e)

    def list_rides(
        self,
        session: SessionContext,
        status: Optional[str] = None,
        limit: int = 50,
        offset: int = 0
    ) -> List[CarpoolResponse]:
        """Rides from every driver, soonest departure first"""
        try:
            query = self.supabase.table(TABLE.value).select("*")
            if status:
                query = query.eq("status", status)
            result = query.order("departure_date")\
                .limit(limit)\
                .offset(offset)\
                .execute()
            return [CarpoolResponse(**row) for row in visible_rows(session, TABLE, result.data or [])]
        except Exception as e:
            raise_store_error(e)

    def update_ride(self, session: SessionContext, ride_id: str, ride_data: CarpoolUpdate) -> CarpoolResponse:
        """Update ride (driver only). Seat counts are stored as given."""
        try:
            row = self._get_row(session, ride_id)
            authorize(session, TABLE, Operation.UPDATE, row)

            update_data = ride_data.model_dump(exclude_unset=True, mode="json")
            if not update_data:
                return CarpoolResponse(**row)

            result = self.supabase.table(TABLE.value)\
                .update(update_data)\
                .eq("id", ride_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Carpool ride not found")

            self.activity.record(session.user_id, "update", "carpool_ride", ride_id, {"fields": sorted(update_data)})
            return CarpoolResponse(**result.data[0])
        except Exception as e:
            raise_store_error(e)

    def complete_ride(self, session: SessionContext, ride_id: str) -> CarpoolResponse:
        """active -> completed (driver only)"""
        try:
            row = self._get_row(session, ride_id)
            authorize(session, TABLE, Operation.UPDATE, row)

            result = self.supabase.table(TABLE.value)\
                .update({
                    "status": "completed",
                    "completed_at": datetime.now(timezone.utc).isoformat(),
                })\
                .eq("id", ride_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Carpool ride not found")

            self.activity.record(session.user_id, "complete", "carpool_ride", ride_id)
            return CarpoolResponse(**result.data[0])
        except Exception as e:
            raise_store_error(e)

    def delete_ride(self, session: SessionContext, ride_id: str) -> bool:
        try:
            row = self._get_row(session, ride_id)
            authorize(session, TABLE, Operation.DELETE, row)

            result = self.supabase.table(TABLE.value)\
                .delete()\
                .eq("id", ride_id)\
                .execute()

            self.activity.record(session.user_id, "delete", "carpool_ride", ride_id)
            return len(result.data or []) > 0
        except Exception as e:
            raise_store_error(e)
