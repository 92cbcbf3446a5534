# nebula_containerz/models/engine.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
from typing import List, Optional

from pydantic import BaseModel


class ImageSummary(BaseModel):
    id: str = ""
    repo_tags: List[str] = []


class PortSummary(BaseModel):
    private_port: int = 0
    public_port: Optional[int] = None
    type: str = "tcp"


class ContainerSummary(BaseModel):
    id: str = ""
    names: List[str] = []
    ports: List[PortSummary] = []


class CreateResponse(BaseModel):
    id: str
    warnings: List[str] = []
