# nebula_containerz/api/containers.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
import asyncio

from fastapi import APIRouter, Depends, HTTPException

from ..core.context import context
from ..core.starter import ContainerStarter
from ..errors import ContainerzError
from ..models.container import StartRequest, StartResponse
from .deps import get_starter

router = APIRouter(prefix="/containers", tags=["Orchestration"])


@router.post("/start", response_model=StartResponse)
async def start_container(data: StartRequest, starter: ContainerStarter = Depends(get_starter)):
    try:
        instance_id = await asyncio.to_thread(starter.start, data)
    except ContainerzError as e:
        context.logger.info(f"Start of {data.image}:{data.tag} failed ({e.code}): {e}")
        raise HTTPException(status_code=e.status_code, detail=str(e))
    return StartResponse(instance_id=instance_id)
