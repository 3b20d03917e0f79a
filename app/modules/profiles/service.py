from supabase import Client
from app.modules.profiles.schemas import ProfileUpdate, ProfileResponse
from app.modules.activity.service import ActivityLogService
from app.core.errors import raise_store_error
from app.core.policies import Operation, Table, authorize, is_allowed
from app.core.session import SessionContext
from fastapi import HTTPException
from datetime import datetime, timezone


class ProfileService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.activity = ActivityLogService(supabase)

    def get_own_profile(self, session: SessionContext) -> ProfileResponse:
        """Get the caller's profile"""
        try:
            result = self.supabase.table(Table.PROFILES.value)\
                .select("*")\
                .eq("user_id", session.user_id)\
                .maybe_single()\
                .execute()

            if not result or not result.data or not is_allowed(session, Table.PROFILES, Operation.SELECT, result.data):
                raise HTTPException(status_code=404, detail="Profile not found")

            return ProfileResponse(**result.data)
        except Exception as e:
            raise_store_error(e)

    def update_own_profile(self, session: SessionContext, profile_data: ProfileUpdate) -> ProfileResponse:
        """Update the caller's profile (name and avatar only)"""
        try:
            current = self.get_own_profile(session)
            authorize(session, Table.PROFILES, Operation.UPDATE, current.model_dump())

            update_data = {}
            if profile_data.name is not None:
                update_data["name"] = profile_data.name.strip()
            if profile_data.avatar_url is not None:
                update_data["avatar_url"] = profile_data.avatar_url

            if not update_data:
                return current

            update_data["updated_at"] = datetime.now(timezone.utc).isoformat()

            result = self.supabase.table(Table.PROFILES.value)\
                .update(update_data)\
                .eq("id", current.id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Profile not found")

            self.activity.record(
                session.user_id, "update", "profile", current.id,
                {"fields": sorted(k for k in update_data if k != "updated_at")}
            )
            return ProfileResponse(**result.data[0])
        except Exception as e:
            raise_store_error(e)
