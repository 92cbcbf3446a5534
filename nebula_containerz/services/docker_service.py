# nebula_containerz/services/docker_service.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
from typing import List, Optional

import docker
from docker.types import Mount

from ..errors import InternalError
from ..models.engine import ContainerSummary, CreateResponse, ImageSummary, PortSummary
from ..models.start_config import StartConfig
from ..utils.config import settings
from ..utils.logger import get_logger
from .engine import ContainerEngine

logger = get_logger("nebula_containerz.docker")

# The service must not crash application startup if the Docker daemon/socket
# is unavailable: the client is created on first use and errors are raised
# from the individual calls.

class DockerService(ContainerEngine):
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None, client=None):
        self.base_url = base_url if base_url is not None else settings.DOCKER_HOST
        self.timeout = timeout or settings.DOCKER_TIMEOUT
        self.client = client
        self.available = client is not None

    def ensure_client(self) -> bool:
        """Attempt to (re)initialize the low-level docker API client on demand."""
        if self.client is not None:
            return True
        try:
            if self.base_url:
                self.client = docker.APIClient(base_url=self.base_url, timeout=self.timeout)
            else:
                self.client = docker.from_env(timeout=self.timeout).api
            self.available = True
            logger.info("Docker client connected on-demand")
            return True
        except docker.errors.DockerException as e:
            logger.debug(f"Docker client on-demand init failed: {e}")
            self.client = None
            self.available = False
            return False

    def _api(self):
        if not self.ensure_client():
            raise InternalError("Docker daemon not available")
        return self.client

    def ping(self) -> bool:
        if not self.ensure_client():
            return False
        try:
            return bool(self.client.ping())
        except docker.errors.DockerException as e:
            logger.debug(f"Docker ping failed: {e}")
            return False

    def list_images(self) -> List[ImageSummary]:
        api = self._api()
        try:
            raw = api.images()
        except docker.errors.DockerException as e:
            raise InternalError(f"failed to list images: {e}") from e
        return [
            ImageSummary(id=img.get("Id") or "", repo_tags=img.get("RepoTags") or [])
            for img in raw
        ]

    def list_containers(self) -> List[ContainerSummary]:
        api = self._api()
        try:
            raw = api.containers()
        except docker.errors.DockerException as e:
            raise InternalError(f"failed to list containers: {e}") from e

        res = []
        for c in raw:
            ports = [
                PortSummary(
                    private_port=p.get("PrivatePort") or 0,
                    public_port=p.get("PublicPort"),
                    type=p.get("Type") or "tcp",
                )
                for p in c.get("Ports") or []
            ]
            res.append(ContainerSummary(id=c.get("Id") or "", names=c.get("Names") or [], ports=ports))
        return res

    @staticmethod
    def _host_config_kwargs(config: StartConfig) -> dict:
        """Map StartConfig onto create_host_config kwargs, leaving zero values to engine defaults."""
        kwargs = {}
        if config.port_bindings:
            kwargs["port_bindings"] = {k: list(v) for k, v in config.port_bindings.items()}
        if config.mounts:
            kwargs["mounts"] = [Mount(target=m.target, source=m.source, type=m.type) for m in config.mounts]
        if config.devices:
            kwargs["devices"] = [
                {
                    "PathOnHost": d.path_on_host,
                    "PathInContainer": d.path_in_container,
                    "CgroupPermissions": d.cgroup_permissions,
                }
                for d in config.devices
            ]
        if config.restart_policy.name:
            kwargs["restart_policy"] = {
                "Name": config.restart_policy.name,
                "MaximumRetryCount": config.restart_policy.maximum_retry_count,
            }
        if config.cap_add:
            kwargs["cap_add"] = list(config.cap_add)
        if config.cap_drop:
            kwargs["cap_drop"] = list(config.cap_drop)
        if config.network_mode:
            kwargs["network_mode"] = config.network_mode
        if config.resources.nano_cpus:
            kwargs["nano_cpus"] = config.resources.nano_cpus
        if config.resources.memory:
            kwargs["mem_limit"] = config.resources.memory
        if config.resources.memory_reservation:
            kwargs["mem_reservation"] = config.resources.memory_reservation
        return kwargs

    @staticmethod
    def _exposed_ports(config: StartConfig):
        ports = []
        for entry in config.exposed_ports:
            port, _, proto = entry.partition("/")
            ports.append((int(port), proto or "tcp"))
        return ports

    def create_container(
        self,
        image_ref: str,
        config: StartConfig,
        name: Optional[str] = None,
        platform: Optional[str] = None,
    ) -> CreateResponse:
        api = self._api()
        try:
            host_config = api.create_host_config(**self._host_config_kwargs(config))
            resp = api.create_container(
                image=image_ref,
                command=list(config.argv) or None,
                user=config.user or None,
                ports=self._exposed_ports(config) or None,
                environment=list(config.env) or None,
                labels=dict(config.labels) or None,
                host_config=host_config,
                name=name,
                platform=platform,
            )
        except docker.errors.DockerException as e:
            raise InternalError(f"failed to create container: {e}") from e
        return CreateResponse(id=resp.get("Id", ""), warnings=resp.get("Warnings") or [])

    def start_container(self, container_id: str) -> None:
        api = self._api()
        try:
            api.start(container_id)
        except docker.errors.DockerException as e:
            raise InternalError(f"failed to start container {container_id}: {e}") from e
