# nebula_containerz/core/context.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
from dataclasses import dataclass
from typing import Optional
from ..utils.config import settings
from ..utils.logger import get_logger

@dataclass
class ContainerzContext:
    config: any
    logger: any
    engine: Optional[object] = None
    starter: Optional[object] = None

context = ContainerzContext(
    config=settings,
    logger=get_logger("nebula_containerz")
)
