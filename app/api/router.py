from fastapi import APIRouter

from app.api.seasons import router as seasons_router
from app.api.teams import router as teams_router
from app.api.players import router as players_router
from app.api.coaches import router as coaches_router
from app.api.stats import router as stats_router
from app.api.admin.router import router as admin_router

api_router = APIRouter()

# Read API
api_router.include_router(seasons_router)
api_router.include_router(teams_router)
api_router.include_router(players_router)
api_router.include_router(coaches_router)
api_router.include_router(stats_router)

# Admin API
api_router.include_router(admin_router)
