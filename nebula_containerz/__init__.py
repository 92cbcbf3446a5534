# nebula_containerz/__init__.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
"""Container start request translation and validation for Nebula."""
from .core.starter import ContainerStarter
from .errors import (
    AlreadyExistsError,
    ContainerzError,
    FailedPreconditionError,
    InternalError,
    InvalidArgumentError,
    NotFoundError,
    UnavailableError,
)

__all__ = [
    "ContainerStarter",
    "ContainerzError",
    "AlreadyExistsError",
    "FailedPreconditionError",
    "InternalError",
    "InvalidArgumentError",
    "NotFoundError",
    "UnavailableError",
]
