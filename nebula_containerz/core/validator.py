# nebula_containerz/core/validator.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
from typing import Iterable, Optional, Set

from ..errors import AlreadyExistsError, FailedPreconditionError, UnavailableError
from ..models.engine import ContainerSummary
from ..models.options import OptionSet, RunAs
from ..services.engine import ContainerEngine


def check_instance_name(name: Optional[str], containers: Iterable[ContainerSummary]):
    if not name:
        return
    wanted = f"/{name}"
    for c in containers:
        if wanted in c.names:
            raise AlreadyExistsError(f"instance name {name} already in use")


def published_ports(containers: Iterable[ContainerSummary]) -> Set[int]:
    return {p.public_port for c in containers for p in c.ports if p.public_port}


def check_ports(host_ports: Iterable[int], containers: Iterable[ContainerSummary]):
    in_use = published_ports(containers)
    # Ascending scan so the reported port is reproducible.
    for port in sorted(host_ports):
        if port in in_use:
            raise UnavailableError(f"port {port} already in use")


def check_run_as(run_as: Optional[RunAs]):
    if run_as is not None and not run_as.user:
        raise FailedPreconditionError("user can not be empty in RunAs option")


def validate_start(engine: ContainerEngine, options: OptionSet):
    """Reject a start request that clashes with running containers.

    Name, then ports, then run-as. Nothing is mutated on the engine.
    """
    containers = engine.list_containers()
    check_instance_name(options.instance_name, containers)
    if options.ports:
        check_ports(options.ports.keys(), containers)
    check_run_as(options.run_as)
