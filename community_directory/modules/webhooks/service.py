import json
import logging
from typing import Any, Dict, Mapping, Union

from pydantic import ValidationError
from supabase import Client
from svix.webhooks import Webhook, WebhookVerificationError

from community_directory.config import settings
from community_directory.core.exceptions import WebhookError
from community_directory.modules.emails.service import EmailService
from community_directory.modules.profiles.service import ProfileService
from community_directory.modules.webhooks.schemas import ClerkEvent, WebhookResponse

logger = logging.getLogger(__name__)

SVIX_HEADERS = ("svix-id", "svix-timestamp", "svix-signature")


def _load_json(payload: Union[bytes, str]) -> Any:
    try:
        return json.loads(payload)
    except ValueError as e:
        raise WebhookError(400, "Invalid webhook payload", error=e)


def verify_webhook(payload: bytes, headers: Mapping[str, str]) -> Dict[str, Any]:
    """Check the svix signature on a raw body and return the decoded JSON.

    In development the signature is not checked.
    """
    if settings.is_development:
        logger.warning("Development mode: bypassing webhook signature verification")
        return _load_json(payload)

    if not settings.clerk_webhook_secret:
        logger.error("CLERK_WEBHOOK_SECRET is not configured")
        raise WebhookError(500, "Server configuration error", error="Missing webhook signing secret")

    svix_headers = {name: headers.get(name) for name in SVIX_HEADERS}
    missing = [name for name, value in svix_headers.items() if not value]
    if missing:
        logger.warning(f"Webhook rejected, missing headers: {', '.join(missing)}")
        raise WebhookError(401, "Missing webhook signature headers")

    # verify() only checks the signature; its return value differs across svix releases
    try:
        Webhook(settings.clerk_webhook_secret).verify(payload, svix_headers)
    except WebhookVerificationError as e:
        logger.warning(f"Webhook verification failed for {svix_headers['svix-id']}: {e}")
        raise WebhookError(401, "Invalid webhook signature")
    return _load_json(payload)


def parse_event(payload: Any) -> ClerkEvent:
    if not isinstance(payload, dict):
        raise WebhookError(400, "Invalid webhook payload", error="Expected a JSON object")
    try:
        return ClerkEvent(**payload)
    except ValidationError as e:
        raise WebhookError(400, "Invalid webhook payload", error=e)


class WebhookService:
    def __init__(self, supabase: Client):
        self.profiles = ProfileService(supabase)
        self.emails = EmailService(supabase)

    def dispatch(self, event: ClerkEvent) -> WebhookResponse:
        """Route an event to its handler by type prefix"""
        logger.info(f"Processing event: {event.type}")
        if event.type.startswith("user."):
            return self.handle_user_event(event)
        if event.type.startswith("email."):
            return self.handle_email_event(event)

        logger.info(f"Skipping unsupported event type: {event.type}")
        return WebhookResponse(message="Event type not handled")

    def handle_user_event(self, event: ClerkEvent) -> WebhookResponse:
        if event.type == "user.deleted":
            self.profiles.delete_profile(event.data)
            return WebhookResponse(message="User deleted successfully")

        profile = self.profiles.upsert_profile(event.data)
        return WebhookResponse(message="User profile updated successfully", data=profile)

    def handle_email_event(self, event: ClerkEvent) -> WebhookResponse:
        if event.type != "email.created":
            return WebhookResponse(message="Email event type not handled")

        stored = self.emails.record_email(event.data)
        if stored is None:
            return WebhookResponse(message="Email already recorded")
        return WebhookResponse(message="Email data stored successfully", data=stored)
