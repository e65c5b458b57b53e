import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from supabase import Client

from community_directory.config import settings
from community_directory.core.exceptions import WebhookError
from community_directory.core.rate_limit import limiter
from community_directory.database.supabase_client import get_supabase
from community_directory.modules.webhooks.schemas import WebhookResponse
from community_directory.modules.webhooks.service import WebhookService, parse_event, verify_webhook

logger = logging.getLogger(__name__)

router = APIRouter(tags=["webhooks"])


@router.post("/clerk-webhook", response_model=WebhookResponse, response_model_exclude_none=True)
@limiter.exempt
async def clerk_webhook(
    request: Request,
    supabase: Optional[Client] = Depends(get_supabase)
):
    """Sync Clerk user.* and email.* events into Supabase"""
    logger.info("Received webhook request")
    payload = await request.body()
    event = parse_event(verify_webhook(payload, request.headers))

    if supabase is None:
        logger.error("Missing required environment variables for Supabase")
        raise WebhookError(500, "Server configuration error", error="Missing required environment variables")

    try:
        return WebhookService(supabase).dispatch(event)
    except WebhookError:
        raise
    except Exception as e:
        logger.exception(f"Webhook error while processing {event.type}")
        raise WebhookError(
            500,
            "Internal server error",
            error=None if settings.is_production else f"{type(e).__name__}: {e}",
        )
