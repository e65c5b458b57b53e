import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import HTTPException
from pydantic import ValidationError
from supabase import Client

from community_directory.core.exceptions import WebhookError
from community_directory.modules.emails.schemas import ClerkEmailData, EmailRecordResponse

logger = logging.getLogger(__name__)

EMAILS_TABLE = "emails"


class EmailService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    @staticmethod
    def build_email_row(email: ClerkEmailData) -> Dict[str, Any]:
        return {
            "email_id": email.id,
            "user_id": email.user_id,
            "to_address": email.to_email_address,
            "subject": email.subject,
            "status": email.status,
            "type": email.type,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }

    def record_email(self, email_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Log an email.created event once per Clerk email id.

        Returns the stored row, or None when the email was already logged.
        """
        try:
            email = ClerkEmailData(**(email_data or {}))
        except ValidationError as e:
            raise WebhookError(400, "Invalid email payload", error=e)
        if not email.id:
            raise WebhookError(400, "Email ID is required")

        logger.info(f"Processing email {email.id} to {email.to_email_address} (status={email.status})")
        row = self.build_email_row(email)
        try:
            result = self.supabase.table(EMAILS_TABLE)\
                .upsert(row, on_conflict="email_id", ignore_duplicates=True)\
                .execute()
        except Exception as e:
            logger.error(f"Error storing email data {email.id}: {e}")
            raise WebhookError(500, "Failed to store email data", error=e)

        if not result.data:
            logger.info(f"Email {email.id} already logged")
            return None
        return result.data[0]

    def list_emails_for_user(
        self,
        clerk_user_id: str,
        limit: int = 20,
        offset: int = 0
    ) -> List[EmailRecordResponse]:
        """Email log for one Clerk user, newest first"""
        try:
            result = self.supabase.table(EMAILS_TABLE)\
                .select("*")\
                .eq("user_id", clerk_user_id)\
                .order("created_at", desc=True)\
                .limit(limit)\
                .offset(offset)\
                .execute()
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
        return [EmailRecordResponse(**email) for email in result.data or []]
