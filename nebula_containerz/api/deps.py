# nebula_containerz/api/deps.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
from ..core.context import context
from ..core.starter import ContainerStarter
from ..services.docker_service import DockerService


def get_engine():
    if context.engine is None:
        context.engine = DockerService()
    return context.engine


def get_starter() -> ContainerStarter:
    if context.starter is None:
        context.starter = ContainerStarter(get_engine(), default_platform=context.config.DEFAULT_PLATFORM)
    return context.starter
