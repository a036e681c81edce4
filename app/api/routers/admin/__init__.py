from fastapi import APIRouter, Depends

from app.api.dependencies import get_current_admin_dependency
from app.api.routers.admin.auth_router import router as auth_router
from app.api.routers.admin.submissions import router as submissions_router


PROTECTED = Depends(get_current_admin_dependency)
admin_routers = APIRouter(prefix="/admin")


admin_routers.include_router(auth_router, tags=["AUTH"])
admin_routers.include_router(submissions_router, tags=["SUBMISSIONS"], dependencies=[PROTECTED])
