# nebula_containerz/core/resolver.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
from ..errors import NotFoundError
from ..models.engine import ImageSummary
from ..services.engine import ContainerEngine


def image_reference(image: str, tag: str) -> str:
    return f"{image}:{tag}"


def resolve_image(engine: ContainerEngine, image: str, tag: str) -> ImageSummary:
    """Find the engine image tagged exactly image:tag.

    Looked up on every call; tags move between requests.
    """
    ref = image_reference(image, tag)
    for summary in engine.list_images():
        if ref in summary.repo_tags:
            return summary
    raise NotFoundError(f"image {ref} not found")
