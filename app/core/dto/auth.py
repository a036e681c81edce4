from pydantic import BaseModel, Field


class LoginModel(BaseModel):
    username: str = Field(..., min_length=1, max_length=200)
    password: str = Field(..., min_length=1, max_length=1024)


class AuthStatusModel(BaseModel):
    authenticated: bool


class SessionStatus(BaseModel):
    authenticated: bool
    username: str | None = None
