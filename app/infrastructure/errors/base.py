from fastapi import HTTPException, status


class ValidationError(HTTPException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Required fields missing"

    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=self.status_code,
            detail=detail or self.detail
        )


class StorageError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Server error"

    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=self.status_code,
            detail=detail or self.detail
        )
