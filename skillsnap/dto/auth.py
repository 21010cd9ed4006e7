from typing import List

from .base import CamelModel


class RegisterRequest(CamelModel):
    email: str
    password: str


class LoginRequest(CamelModel):
    email: str
    password: str
    remember_me: bool = False


class AuthResponse(CamelModel):
    message: str
    token: str
    account_id: int
    email: str


class AccountInfo(CamelModel):
    account_id: int
    email: str
    roles: List[str]
