from fastapi import APIRouter

from app.api.admin.stats import router as stats_router

router = APIRouter(prefix="/admin")
router.include_router(stats_router)
