# yoda/schemas/auth_schemas.py

from pydantic import BaseModel, EmailStr, Field

from yoda.models import UserPublic


class RegisterRequest(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=1)


class LoginRequest(BaseModel):
    email: str
    password: str


class AuthResponse(BaseModel):
    user: UserPublic
    token: str
