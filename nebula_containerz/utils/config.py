# nebula_containerz/utils/config.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)

import os
import yaml
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings

CONFIG_PATH = Path(__file__).parent.parent / "serviceconfig.yaml"


def load_yaml_config(config_path: str | Path | None = None):
    target = Path(config_path) if config_path else CONFIG_PATH
    if target.exists():
        with open(target, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    return {}

class Settings(BaseSettings):
    APP_NAME: str = "Nebula Containerz"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"
    # Empty disables daily log files.
    LOG_DIR: str = ""

    SERVER_HOST: str = "127.0.0.1"
    SERVER_PORT: int = 8100
    DEBUG: bool = False

    # Falls back to DOCKER_HOST / docker.from_env() when unset.
    DOCKER_HOST: Optional[str] = None
    DOCKER_TIMEOUT: int = 60
    DEFAULT_PLATFORM: Optional[str] = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

yaml_config = load_yaml_config(os.getenv("CONTAINERZ_CONFIG"))
settings = Settings(**yaml_config.get("service", {}))
