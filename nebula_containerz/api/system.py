# nebula_containerz/api/system.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
import asyncio

from fastapi import APIRouter, Depends

from ..core.context import context
from .deps import get_engine

router = APIRouter(prefix="/system", tags=["System"])

@router.get("/status")
async def system_status(engine=Depends(get_engine)):
    ping = getattr(engine, "ping", None)
    available = await asyncio.to_thread(ping) if ping else True
    return {
        "status": "ok",
        "app": context.config.APP_NAME,
        "version": context.config.APP_VERSION,
        "engine_available": bool(available),
    }
