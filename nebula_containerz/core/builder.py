# nebula_containerz/core/builder.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
import math
from typing import Iterable

from ..errors import InvalidArgumentError
from ..models.options import DevicePermission, OptionSet, RestartKind
from ..models.start_config import (
    DeviceMapping,
    MountSpec,
    ResourceLimits,
    RestartPolicySpec,
    StartConfig,
)
from .tokenizer import split_command

NANO_CPUS_PER_CPU = 1_000_000_000
MAX_NANO_CPUS = 2**63 - 1
HOST_NETWORK = "host"

RESTART_POLICY_NAMES = {
    RestartKind.NONE: "no",
    RestartKind.ALWAYS: "always",
    RestartKind.ON_FAILURE: "on-failure",
    RestartKind.UNLESS_STOPPED: "unless-stopped",
}

# Fixed rendering order of cgroup device permissions.
_PERMISSION_LETTERS = (
    (DevicePermission.READ, "r"),
    (DevicePermission.WRITE, "w"),
    (DevicePermission.MKNOD, "m"),
)


def cgroup_permissions(permissions: Iterable[DevicePermission]) -> str:
    requested = set(permissions)
    return "".join(letter for perm, letter in _PERMISSION_LETTERS if perm in requested)


def nano_cpus(cpus: float) -> int:
    if not math.isfinite(cpus) or cpus < 0 or cpus * NANO_CPUS_PER_CPU > MAX_NANO_CPUS:
        raise InvalidArgumentError(f"invalid cpu count: {cpus}")
    return int(round(cpus * NANO_CPUS_PER_CPU))


def format_user(user: str, group: str = "") -> str:
    return f"{user}:{group}" if group else user


def build_start_config(command: str, options: OptionSet) -> StartConfig:
    """Turn a command line and validated options into the engine-facing StartConfig."""
    config = StartConfig(argv=split_command(command))

    if options.ports:
        for host_port, container_port in sorted(options.ports.items()):
            key = f"{container_port}/tcp"
            if key not in config.exposed_ports:
                config.exposed_ports.append(key)
            config.port_bindings.setdefault(key, []).append(host_port)

    if options.env:
        config.env = [f"{key}={value}" for key, value in sorted(options.env.items())]

    if options.run_as is not None:
        config.user = format_user(options.run_as.user, options.run_as.group)

    if options.restart_policy is not None:
        config.restart_policy = RestartPolicySpec(
            name=RESTART_POLICY_NAMES[options.restart_policy.policy],
            maximum_retry_count=options.restart_policy.attempts,
        )

    if options.capabilities is not None:
        config.cap_add = list(options.capabilities.add)
        config.cap_drop = list(options.capabilities.remove)

    # "host" is the engine default and is never set explicitly.
    if options.network and options.network != HOST_NETWORK:
        config.network_mode = options.network

    if options.labels:
        config.labels = dict(options.labels)

    if options.volumes:
        config.mounts = [
            MountSpec(type="volume", source=volume.name, target=volume.mount_point)
            for volume in options.volumes
        ]

    if options.devices:
        config.devices = [
            DeviceMapping(
                path_on_host=device.src_path,
                path_in_container=device.dst_path,
                cgroup_permissions=cgroup_permissions(device.permissions),
            )
            for device in options.devices
        ]

    config.resources = ResourceLimits(
        nano_cpus=nano_cpus(options.cpus) if options.cpus else 0,
        memory=options.hard_limit or 0,
        memory_reservation=options.soft_limit or 0,
    )
    return config
