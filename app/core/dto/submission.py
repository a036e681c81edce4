from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class SubmissionCreateModel(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    full_name: str = Field(..., min_length=1, max_length=200)
    phone: str = Field(..., min_length=1, max_length=50)
    email: EmailStr | None = None
    message: str = Field(..., min_length=1, max_length=5000)

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class SubmissionModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    full_name: str
    phone: str
    email: str | None
    message: str
    submitted_at: datetime

    @field_validator("submitted_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite hands back naive datetimes; they were written as UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class SubmissionListResponse(BaseModel):
    success: bool = True
    data: list[SubmissionModel]
