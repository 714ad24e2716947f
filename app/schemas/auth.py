from typing import Optional
from pydantic import BaseModel, constr


class RegisterRequest(BaseModel):
    email: constr(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", max_length=255)
    password: constr(min_length=8, max_length=128)
    full_name: Optional[str] = None
    phone: Optional[str] = None


class LoginRequest(BaseModel):
    email: constr(min_length=3, max_length=255)
    password: constr(min_length=1, max_length=128)


class RefreshRequest(BaseModel):
    refresh_token: str
