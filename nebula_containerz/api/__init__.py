from fastapi import APIRouter
from .system import router as system_router
from .containers import router as containers_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(containers_router)
