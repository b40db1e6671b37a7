"""Pydantic schemas for User and Auth."""

from pydantic import BaseModel, EmailStr, Field

from rental_api.domain.schemas.common import CamelModel, PyObjectId


class UserCreate(BaseModel):
    name: str = Field(min_length=5, max_length=50)
    email: EmailStr
    password: str = Field(min_length=5, max_length=255)


class UserRead(CamelModel):
    id: PyObjectId = Field(alias="_id")
    name: str
    email: str
    is_admin: bool = False


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=5, max_length=255)


class TokenIdentity(CamelModel):
    """Identity carried inside an auth token."""
    id: str = Field(alias="_id")
    is_admin: bool = False
