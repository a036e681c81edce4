from fastapi import HTTPException

from app.core.dto.common import ErrorModel


def error_response(error: type[HTTPException]) -> dict:
    return {
        error.status_code: {
            "model": ErrorModel,
            "description": error.detail,
        }
    }
