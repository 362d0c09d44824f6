"""Pydantic schemas for signup / login."""
from pydantic import BaseModel


# Fields are optional so that missing values surface as a 400, not a 422
class SignupSchema(BaseModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None


class LoginSchema(BaseModel):
    email: str | None = None
    password: str | None = None


class SignupOutSchema(BaseModel):
    ok: bool = True
    userId: int


class LoginOutSchema(BaseModel):
    ok: bool = True
    userId: int
    name: str
    email: str
