"""
Send Test Webhook Script
Builds a fake Clerk user.created event, signs it with CLERK_WEBHOOK_SECRET
the same way Clerk does (svix), and posts it to a running instance.
"""

import argparse
import json
import logging
import sys
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Dict

import httpx
from svix.webhooks import Webhook

from community_directory.config.settings import Settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_URL = "http://localhost:8000/api/clerk-webhook"


def build_user_created_event() -> Dict[str, Any]:
    stamp = int(time.time() * 1000)
    return {
        "object": "event",
        "type": "user.created",
        "data": {
            "id": f"user_test_{uuid.uuid4().hex[:24]}",
            "email_addresses": [
                {
                    "id": f"idn_test_{stamp}",
                    "email_address": "test@example.com",
                    "verification": {"status": "verified", "strategy": "email_code"},
                }
            ],
            "primary_email_address_id": f"idn_test_{stamp}",
            "username": f"testuser_{stamp}",
            "first_name": "Test",
            "last_name": "User",
            "image_url": "https://example.com/avatar.jpg",
            "created_at": stamp,
            "updated_at": stamp,
        },
    }


def sign_headers(secret: str, body: str) -> Dict[str, str]:
    msg_id = f"msg_{uuid.uuid4().hex}"
    now = datetime.now(tz=timezone.utc)
    return {
        "svix-id": msg_id,
        "svix-timestamp": str(int(now.timestamp())),
        "svix-signature": Webhook(secret).sign(msg_id, now, body),
    }


def send_test_webhook(url: str, secret: str) -> httpx.Response:
    event = build_user_created_event()
    body = json.dumps(event)
    headers = {"Content-Type": "application/json", **sign_headers(secret, body)}
    logger.info(f"Sending user.created for {event['data']['id']} to {url}")
    return httpx.post(url, content=body, headers=headers, timeout=10.0)


def main() -> int:
    parser = argparse.ArgumentParser(description="Send a signed test Clerk webhook")
    parser.add_argument("--url", default=DEFAULT_URL, help=f"Webhook endpoint (default: {DEFAULT_URL})")
    args = parser.parse_args()

    settings = Settings()
    if not settings.clerk_webhook_secret:
        logger.error("CLERK_WEBHOOK_SECRET is not set")
        return 1

    try:
        response = send_test_webhook(args.url, settings.clerk_webhook_secret)
    except httpx.HTTPError as e:
        logger.error(f"Error sending test webhook: {e}")
        return 1

    logger.info(f"Webhook response ({response.status_code}): {response.text}")
    if not response.is_success:
        logger.error("Webhook test failed")
        return 1
    logger.info("Webhook test successful")
    return 0


if __name__ == "__main__":
    sys.exit(main())
