from fastapi import HTTPException, status


class AuthError(HTTPException):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Unauthorized"

    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=self.status_code,
            detail=detail or self.detail,
        )


class InvalidCredentials(AuthError):
    detail = "Invalid credentials"

    def __init__(self):
        super().__init__(detail=self.detail)
