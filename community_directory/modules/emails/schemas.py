from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class ClerkEmailData(BaseModel):
    id: Optional[str] = None
    user_id: Optional[str] = None
    to_email_address: Optional[str] = None
    subject: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None


class EmailRecordResponse(BaseModel):
    email_id: str
    user_id: Optional[str] = None
    to_address: Optional[str] = None
    subject: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
