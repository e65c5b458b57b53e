from pydantic import BaseModel
from typing import Any, Dict, Optional


class ClerkEvent(BaseModel):
    type: str
    data: Dict[str, Any] = {}
    object: Optional[str] = None


class WebhookResponse(BaseModel):
    success: bool = True
    message: str
    data: Optional[Dict[str, Any]] = None
