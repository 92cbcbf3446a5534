# nebula_containerz/services/engine.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.engine import ContainerSummary, CreateResponse, ImageSummary
from ..models.start_config import StartConfig


class ContainerEngine(ABC):
    """Calls the start path needs from a container engine.

    Implementations raise `ContainerzError` subclasses only; engine specific
    exceptions must not leak to callers.
    """

    @abstractmethod
    def list_images(self) -> List[ImageSummary]:
        """Return every image known to the engine."""
        raise NotImplementedError

    @abstractmethod
    def list_containers(self) -> List[ContainerSummary]:
        """Return the currently running containers."""
        raise NotImplementedError

    @abstractmethod
    def create_container(
        self,
        image_ref: str,
        config: StartConfig,
        name: Optional[str] = None,
        platform: Optional[str] = None,
    ) -> CreateResponse:
        """Create (without starting) a container; the engine names it when `name` is None."""
        raise NotImplementedError

    @abstractmethod
    def start_container(self, container_id: str) -> None:
        raise NotImplementedError
