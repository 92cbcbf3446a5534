# nebula_containerz/main.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
import os
from fastapi import FastAPI, Request
from dotenv import load_dotenv

load_dotenv()

from .utils.config import settings
from .utils.logger import setup_logger
from .api import api_router
from .core.context import context

logger = setup_logger("nebula_containerz")
COPYRIGHT_NOTICE = "Copyright (c) 2026 Monolink Systems"
LICENSE_NOTICE = "Nebula Open Source Edition (non-corporate) • Licensed under AGPLv3"

context.logger = logger

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url=None if os.getenv("ENV") == "production" else "/docs",
    redoc_url=None
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"Request: {request.method} {request.url.path}")
    response = await call_next(request)
    logger.info(f"Response: {response.status_code} {request.url.path}")
    return response

app.include_router(api_router)

@app.on_event("startup")
async def on_startup():
    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} starting, pid={os.getpid()}")
    logger.info(COPYRIGHT_NOTICE)
    logger.info(LICENSE_NOTICE)

@app.on_event("shutdown")
async def on_shutdown():
    logger.info(f"{settings.APP_NAME} shutting down, pid={os.getpid()}")
