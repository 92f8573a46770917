from pydantic import BaseModel, EmailStr, field_validator
from datetime import datetime
from splitkro.schemas.settlements import MemberId

class GroupCreate(BaseModel):
    name: str
    type: str = "other"

class GroupOut(BaseModel):
    id: str
    name: str
    type: str
    created_by: MemberId
    created_at: datetime

    class Config:
        from_attributes = True

class GroupMemberCreate(BaseModel):
    display_name: str
    email: EmailStr | None = None
    user_id: str | None = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, v):
        if isinstance(v, str):
            return v.strip() or None
        return v

    @field_validator("email", mode="after")
    @classmethod
    def lower_email(cls, v):
        return v.lower() if v else v

class GroupMemberOut(BaseModel):
    id: str
    group_id: str
    user_id: str | None = None
    display_name: str
    email: str | None = None
    joined_at: datetime

    class Config:
        from_attributes = True
