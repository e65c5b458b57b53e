from fastapi import APIRouter, Depends, HTTPException, Query, Request
from supabase import Client
from typing import List

from community_directory.config import settings
from community_directory.core.dependencies import get_current_clerk_user_id, require_supabase
from community_directory.core.rate_limit import limiter
from community_directory.modules.emails.schemas import EmailRecordResponse
from community_directory.modules.emails.service import EmailService
from community_directory.modules.profiles.schemas import ProfileResponse
from community_directory.modules.profiles.service import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])


def get_profile_service(supabase: Client = Depends(require_supabase)) -> ProfileService:
    return ProfileService(supabase)


def get_email_service(supabase: Client = Depends(require_supabase)) -> EmailService:
    return EmailService(supabase)


@router.get("/me", response_model=ProfileResponse)
@limiter.limit(lambda: settings.rate_limit)
async def get_my_profile(
    request: Request,
    clerk_user_id: str = Depends(get_current_clerk_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Profile of the signed-in user, as last synced from Clerk"""
    profile = service.get_profile_by_clerk_id(clerk_user_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.get("/me/emails", response_model=List[EmailRecordResponse])
@limiter.limit(lambda: settings.rate_limit)
async def list_my_emails(
    request: Request,
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    clerk_user_id: str = Depends(get_current_clerk_user_id),
    service: EmailService = Depends(get_email_service)
):
    """Emails Clerk sent to the signed-in user, newest first"""
    return service.list_emails_for_user(clerk_user_id, limit=limit, offset=offset)
