# nebula_containerz/models/options.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
"""Start options.

Every option is a small model holding only its own fields; `apply` writes
that single field into the values later frozen into an `OptionSet`.
"""
from enum import Enum, IntEnum
from typing import Annotated, Any, Dict, Iterable, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class RestartKind(IntEnum):
    NONE = 0
    ALWAYS = 1
    ON_FAILURE = 2
    UNLESS_STOPPED = 3


class DevicePermission(str, Enum):
    READ = "READ"
    WRITE = "WRITE"
    MKNOD = "MKNOD"


class Volume(BaseModel):
    name: str
    mount_point: str


class Device(BaseModel):
    src_path: str
    dst_path: str
    permissions: List[DevicePermission] = []


class InstanceName(BaseModel):
    kind: Literal["instance_name"] = "instance_name"
    name: str

    def apply(self, values: Dict[str, Any]):
        values["instance_name"] = self.name


class RunAs(BaseModel):
    kind: Literal["run_as"] = "run_as"
    user: str = ""
    group: str = ""

    def apply(self, values: Dict[str, Any]):
        values["run_as"] = self


class RestartPolicy(BaseModel):
    kind: Literal["restart_policy"] = "restart_policy"
    policy: RestartKind = RestartKind.NONE
    attempts: int = Field(default=0, ge=0)

    def apply(self, values: Dict[str, Any]):
        values["restart_policy"] = self


class Capabilities(BaseModel):
    kind: Literal["capabilities"] = "capabilities"
    add: List[str] = []
    remove: List[str] = []

    def apply(self, values: Dict[str, Any]):
        values["capabilities"] = self


class Network(BaseModel):
    kind: Literal["network"] = "network"
    name: str

    def apply(self, values: Dict[str, Any]):
        values["network"] = self.name


class Labels(BaseModel):
    kind: Literal["labels"] = "labels"
    labels: Dict[str, str]

    def apply(self, values: Dict[str, Any]):
        values["labels"] = dict(self.labels)


class Env(BaseModel):
    kind: Literal["env"] = "env"
    env: Dict[str, str]

    def apply(self, values: Dict[str, Any]):
        values["env"] = dict(self.env)


PortNumber = Annotated[int, Field(ge=1, le=65535)]

# Largest core count whose nanoCPU value still fits in a signed 64-bit integer.
MAX_CPUS = 9_000_000_000


class Ports(BaseModel):
    """Host port -> container port."""

    kind: Literal["ports"] = "ports"
    ports: Dict[PortNumber, PortNumber]

    def apply(self, values: Dict[str, Any]):
        values["ports"] = dict(self.ports)


class Volumes(BaseModel):
    kind: Literal["volumes"] = "volumes"
    volumes: List[Volume]

    def apply(self, values: Dict[str, Any]):
        values["volumes"] = list(self.volumes)


class Devices(BaseModel):
    kind: Literal["devices"] = "devices"
    devices: List[Device]

    def apply(self, values: Dict[str, Any]):
        values["devices"] = list(self.devices)


class CPUs(BaseModel):
    kind: Literal["cpus"] = "cpus"
    cpus: float = Field(ge=0, le=MAX_CPUS, allow_inf_nan=False)

    def apply(self, values: Dict[str, Any]):
        values["cpus"] = self.cpus


class SoftMemoryLimit(BaseModel):
    kind: Literal["soft_memory_limit"] = "soft_memory_limit"
    limit_bytes: int = Field(ge=0)

    def apply(self, values: Dict[str, Any]):
        values["soft_limit"] = self.limit_bytes


class HardMemoryLimit(BaseModel):
    kind: Literal["hard_memory_limit"] = "hard_memory_limit"
    limit_bytes: int = Field(ge=0)

    def apply(self, values: Dict[str, Any]):
        values["hard_limit"] = self.limit_bytes


Option = Annotated[
    Union[
        InstanceName,
        RunAs,
        RestartPolicy,
        Capabilities,
        Network,
        Labels,
        Env,
        Ports,
        Volumes,
        Devices,
        CPUs,
        SoftMemoryLimit,
        HardMemoryLimit,
    ],
    Field(discriminator="kind"),
]


class OptionSet(BaseModel):
    """Immutable view of the requested options; None means not requested."""

    model_config = ConfigDict(frozen=True)

    instance_name: Optional[str] = None
    run_as: Optional[RunAs] = None
    restart_policy: Optional[RestartPolicy] = None
    capabilities: Optional[Capabilities] = None
    network: Optional[str] = None
    labels: Optional[Dict[str, str]] = None
    env: Optional[Dict[str, str]] = None
    ports: Optional[Dict[int, int]] = None
    volumes: Optional[List[Volume]] = None
    devices: Optional[List[Device]] = None
    cpus: Optional[float] = None
    soft_limit: Optional[int] = None
    hard_limit: Optional[int] = None

    @classmethod
    def from_options(cls, options: Iterable[Option]) -> "OptionSet":
        values: Dict[str, Any] = {}
        for option in options:
            option.apply(values)
        return cls(**values)
