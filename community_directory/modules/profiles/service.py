import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import HTTPException
from pydantic import ValidationError
from supabase import Client

from community_directory.core.exceptions import WebhookError
from community_directory.core.identity import profile_id_for
from community_directory.modules.profiles.schemas import ClerkUserData, ProfileResponse

logger = logging.getLogger(__name__)

PROFILES_TABLE = "profiles"


class ProfileService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    @staticmethod
    def parse_user(user_data: Dict[str, Any]) -> ClerkUserData:
        """Validate a Clerk user payload; the Clerk id is mandatory"""
        try:
            user = ClerkUserData(**(user_data or {}))
        except ValidationError as e:
            raise WebhookError(400, "Invalid user payload", error=e)
        if not user.id:
            raise WebhookError(400, "User ID is required")
        return user

    @staticmethod
    def build_profile_row(user: ClerkUserData) -> Dict[str, Any]:
        return {
            "id": profile_id_for(user.id),
            "clerk_id": user.id,
            "email": user.primary_email(),
            "username": user.username or None,
            "first_name": user.first_name or None,
            "last_name": user.last_name or None,
            "full_name": user.full_name(),
            "avatar_url": user.image_url or None,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }

    def upsert_profile(self, user_data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert or update the single profile row for a Clerk user"""
        user = self.parse_user(user_data)
        row = self.build_profile_row(user)
        logger.debug(f"User profile to upsert: {row}")
        try:
            result = self.supabase.table(PROFILES_TABLE)\
                .upsert(row, on_conflict="id")\
                .execute()
        except Exception as e:
            logger.error(f"Error upserting user profile {user.id}: {e}")
            raise WebhookError(500, "Failed to upsert user profile", error=e)

        stored = result.data[0] if result.data else row
        logger.info(f"Upserted profile {stored['id']} for Clerk user {user.id}")
        return stored

    def delete_profile(self, user_data: Dict[str, Any]) -> bool:
        """Delete the profile row for a Clerk user; True if a row was removed"""
        user_id = (user_data or {}).get("id")
        if not user_id:
            raise WebhookError(400, "User ID is required")
        if not isinstance(user_id, str):
            raise WebhookError(400, "Invalid user payload", error="User ID must be a string")
        profile_id = profile_id_for(user_id)
        try:
            result = self.supabase.table(PROFILES_TABLE)\
                .delete()\
                .eq("id", profile_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error deleting user profile {user_id}: {e}")
            raise WebhookError(500, "Failed to delete user profile", error=e)

        deleted = bool(result.data)
        if not deleted:
            logger.info(f"No profile to delete for Clerk user {user_id}")
        return deleted

    def get_profile_by_clerk_id(self, clerk_user_id: str) -> Optional[ProfileResponse]:
        """Get profile by Clerk user id"""
        try:
            result = self.supabase.table(PROFILES_TABLE)\
                .select("*")\
                .eq("id", profile_id_for(clerk_user_id))\
                .limit(1)\
                .execute()
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

        if not result.data:
            return None
        return ProfileResponse(**result.data[0])
