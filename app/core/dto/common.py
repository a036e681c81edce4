from pydantic import BaseModel


class SuccessResponse(BaseModel):
    success: bool = True
    message: str | None = None


class ErrorModel(BaseModel):
    success: bool = False
    message: str
