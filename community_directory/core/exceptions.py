from typing import Any, Dict, Optional


class WebhookError(Exception):
    """A webhook failure that is reported to the sender as a JSON envelope."""

    def __init__(self, status_code: int, message: str, error: Optional[Any] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error = error

    def to_content(self) -> Dict[str, Any]:
        content: Dict[str, Any] = {"success": False, "message": self.message}
        if self.error is not None:
            content["error"] = str(self.error)
        return content
