from fastapi import HTTPException, status


class RateLimitError(HTTPException):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    detail = "Too many attempts, please try again later."

    def __init__(self, retry_after: int, detail: str | None = None):
        self.retry_after = max(int(retry_after), 1)
        super().__init__(
            status_code=self.status_code,
            detail=detail or self.detail,
            headers={"Retry-After": str(self.retry_after)},
        )
