# Third-party imports
from fastapi import APIRouter

# Local application imports
from app.api.internal.routes.admin import admin_router
from app.api.internal.routes.complaints import complaint_router

router = APIRouter()

# Include all internal routers
router.include_router(admin_router)
router.include_router(complaint_router)
