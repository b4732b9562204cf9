from pydantic import BaseModel, EmailStr, Field
from typing import Optional

from app.schemas.user import UserRead

class UserLogin(BaseModel):
    email: EmailStr
    password: str

class UserRegister(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6)

class AuthResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str

class RegisterResponse(AuthResponse):
    msg: str
    user: UserRead

class LoginResponse(AuthResponse):
    msg: str
    email: Optional[str] = None

class RefreshTokenRequest(BaseModel):
    refresh_token: str
