from fastapi import APIRouter
from lifeos.api import health
from lifeos.features.decision import router as decision_router

api_router = APIRouter()

# Include all sub-routers
api_router.include_router(health.router)
api_router.include_router(decision_router)
