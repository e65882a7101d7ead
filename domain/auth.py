"""Domain Entities - Staff accounts"""
from pydantic import BaseModel, Field
from uuid import UUID, uuid4
from typing import Optional


class User(BaseModel):
    """Hotel staff member able to log in.

    Guests never authenticate; only staff hold accounts. Admins manage the
    hotel directory and reservation statuses.
    """
    user_id: UUID = Field(default_factory=uuid4)
    username: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    disabled: bool = False
    is_admin: bool = False

    class Config:
        from_attributes = True

    def can_administer(self) -> bool:
        return self.is_admin and not self.disabled


class UserInDB(User):
    """Staff account as stored, with its password hash"""
    hashed_password: str
