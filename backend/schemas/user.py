from pydantic import BaseModel, field_validator
from typing import Literal, Optional

# Access tiers; only "manager" sees every submitter's logs
Role = Literal["operator", "manager"]

# Schema for signup form submissions
class UserCreate(BaseModel):
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    password: str
    role: Role = "operator"

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username is required")
        return v

    @field_validator("password")
    @classmethod
    def password_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("password is required")
        return v
