# nebula_containerz/__main__.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)

import uvicorn
import os
from .utils.config import settings


def main():
    host = os.getenv("NEBULA_CONTAINERZ_HOST", settings.SERVER_HOST)
    port = int(os.getenv("NEBULA_CONTAINERZ_PORT", str(settings.SERVER_PORT)))
    reload_enabled = os.getenv("NEBULA_CONTAINERZ_RELOAD", str(settings.DEBUG)).lower() == "true"
    workers = int(os.getenv("NEBULA_CONTAINERZ_WORKERS", "1"))
    if reload_enabled and workers > 1:
        # Uvicorn does not allow reload with multiple workers.
        workers = 1
    uvicorn.run("nebula_containerz.main:app",
                host=host,
                port=port,
                reload=reload_enabled,
                workers=max(1, workers),
                log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
