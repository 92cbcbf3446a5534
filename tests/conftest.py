from typing import List, Optional

import pytest

from nebula_containerz.models.engine import (
    ContainerSummary,
    CreateResponse,
    ImageSummary,
    PortSummary,
)
from nebula_containerz.models.start_config import StartConfig
from nebula_containerz.services.engine import ContainerEngine


class FakeEngine(ContainerEngine):
    """In-memory engine recording what the start path asked for."""

    def __init__(
        self,
        images: Optional[List[ImageSummary]] = None,
        containers: Optional[List[ContainerSummary]] = None,
        create_error: Optional[Exception] = None,
        start_error: Optional[Exception] = None,
    ):
        self.images = images or []
        self.containers = containers or []
        self.create_error = create_error
        self.start_error = start_error
        self.created: List[dict] = []
        self.started: List[str] = []

    def list_images(self) -> List[ImageSummary]:
        return list(self.images)

    def list_containers(self) -> List[ContainerSummary]:
        return list(self.containers)

    def create_container(
        self,
        image_ref: str,
        config: StartConfig,
        name: Optional[str] = None,
        platform: Optional[str] = None,
    ) -> CreateResponse:
        if self.create_error is not None:
            raise self.create_error
        container_id = name or f"generated-{len(self.created)}"
        self.created.append(
            {"image": image_ref, "config": config, "name": name, "platform": platform, "id": container_id}
        )
        return CreateResponse(id=container_id)

    def start_container(self, container_id: str) -> None:
        if self.start_error is not None:
            raise self.start_error
        self.started.append(container_id)

    @property
    def last_config(self) -> StartConfig:
        return self.created[-1]["config"]


def image(*tags: str) -> ImageSummary:
    return ImageSummary(id=f"sha256:{abs(hash(tags)):x}", repo_tags=list(tags))


def running(*names: str, public_ports: tuple = ()) -> ContainerSummary:
    return ContainerSummary(
        names=list(names),
        ports=[PortSummary(private_port=p, public_port=p) for p in public_ports],
    )


@pytest.fixture
def engine():
    return FakeEngine(images=[image("my-image:my-tag")])
