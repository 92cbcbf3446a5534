# nebula_containerz/models/container.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
from pydantic import BaseModel
from typing import List

from .options import Option

class StartRequest(BaseModel):
    image: str
    tag: str = "latest"
    command: str = ""
    options: List[Option] = []


class StartResponse(BaseModel):
    instance_id: str
