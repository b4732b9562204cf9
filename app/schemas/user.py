from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime

class UserRead(BaseModel):
    id: int
    name: str
    username: Optional[str] = None
    email: EmailStr
    phone: Optional[str] = None
    country: Optional[str] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    avatar: Optional[str] = ""
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class UserUpdate(BaseModel):
    name: Optional[str] = None
    username: Optional[str] = None
    phone: Optional[str] = None
    country: Optional[str] = None
    gender: Optional[str] = None
    address: Optional[str] = None
