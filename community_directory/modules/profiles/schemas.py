from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime


class ClerkEmailAddress(BaseModel):
    id: Optional[str] = None
    email_address: str


class ClerkUserData(BaseModel):
    """The `data` object of a Clerk user.* event (only the fields we sync)."""
    id: Optional[str] = None
    email_addresses: List[ClerkEmailAddress] = []
    primary_email_address_id: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    image_url: Optional[str] = None

    def primary_email(self) -> Optional[str]:
        if self.primary_email_address_id:
            for address in self.email_addresses:
                if address.id == self.primary_email_address_id:
                    return address.email_address
        if self.email_addresses:
            return self.email_addresses[0].email_address
        return None

    def full_name(self) -> Optional[str]:
        return f"{self.first_name or ''} {self.last_name or ''}".strip() or None


class ProfileResponse(BaseModel):
    id: str
    clerk_id: str
    email: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    updated_at: datetime

    class Config:
        from_attributes = True
