# nebula_containerz/models/start_config.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
from typing import Dict, List

from pydantic import BaseModel, Field


class MountSpec(BaseModel):
    type: str = "volume"
    source: str
    target: str


class DeviceMapping(BaseModel):
    path_on_host: str
    path_in_container: str
    cgroup_permissions: str = ""


class RestartPolicySpec(BaseModel):
    name: str = ""
    maximum_retry_count: int = 0


class ResourceLimits(BaseModel):
    nano_cpus: int = 0
    memory: int = 0
    memory_reservation: int = 0


class StartConfig(BaseModel):
    """Engine-ready descriptor assembled for a single start call.

    The default instance is the zero value: nothing overridden.
    """

    argv: List[str] = []
    env: List[str] = []
    exposed_ports: List[str] = []
    # "<container port>/tcp" -> host ports bound to it
    port_bindings: Dict[str, List[int]] = {}
    mounts: List[MountSpec] = []
    devices: List[DeviceMapping] = []
    user: str = ""
    restart_policy: RestartPolicySpec = Field(default_factory=RestartPolicySpec)
    cap_add: List[str] = []
    cap_drop: List[str] = []
    network_mode: str = ""
    labels: Dict[str, str] = {}
    resources: ResourceLimits = Field(default_factory=ResourceLimits)
