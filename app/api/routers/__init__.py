from fastapi import APIRouter

from app.api.routers.admin import admin_routers
from app.api.routers.submission import router as submission_router


api_routers = APIRouter(prefix="/api")
api_routers.include_router(submission_router, tags=["contact"])
api_routers.include_router(admin_routers)
