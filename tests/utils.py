"""Shared helpers for building and sending Clerk webhook requests in tests."""

import base64
import json
from typing import Any, Dict, Optional

from fastapi.testclient import TestClient

from community_directory.scripts.send_test_webhook import sign_headers

WEBHOOK_SECRET = "whsec_" + base64.b64encode(b"community-directory-test-signing-key").decode()


def post_event(
    client: TestClient,
    event: Dict[str, Any],
    secret: str = WEBHOOK_SECRET,
    headers: Optional[Dict[str, str]] = None,
):
    """POST an event to the webhook, signed with `secret` unless headers are given."""
    body = json.dumps(event)
    if headers is None:
        headers = sign_headers(secret, body)
    headers = {"Content-Type": "application/json", **headers}
    return client.post("/api/clerk-webhook", content=body, headers=headers)


def clerk_user(user_id: str = "user_2abc", **overrides) -> Dict[str, Any]:
    user = {
        "id": user_id,
        "email_addresses": [
            {"id": "idn_secondary", "email_address": "old@example.com"},
            {"id": "idn_primary", "email_address": "ada@example.com"},
        ],
        "primary_email_address_id": "idn_primary",
        "username": "ada",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "image_url": "https://img.clerk.com/ada.png",
    }
    user.update(overrides)
    return user


def clerk_email(email_id: str = "ema_123", **overrides) -> Dict[str, Any]:
    email = {
        "id": email_id,
        "object": "email",
        "user_id": "user_2abc",
        "to_email_address": "ada@example.com",
        "subject": "Your verification code",
        "status": "queued",
        "type": "verification_code",
    }
    email.update(overrides)
    return email
