# nebula_containerz/core/starter.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
from typing import Optional

from ..errors import ContainerzError, InternalError
from ..models.container import StartRequest
from ..models.options import Option, OptionSet
from ..services.engine import ContainerEngine
from ..utils.logger import get_logger
from .builder import build_start_config
from .resolver import image_reference, resolve_image
from .validator import validate_start

logger = get_logger("nebula_containerz.start")


class ContainerStarter:
    """Resolve, validate, build and hand a start request to the engine.

    Every rejection happens before the engine is asked to create anything.
    A container that was created but failed to start is left in place and
    the start error is returned to the caller.
    """

    def __init__(self, engine: ContainerEngine, default_platform: Optional[str] = None):
        self.engine = engine
        self.default_platform = default_platform

    def start_container(self, image: str, tag: str, command: str, *options: Option) -> str:
        ref = image_reference(image, tag)
        opts = OptionSet.from_options(options)

        try:
            resolved = resolve_image(self.engine, image, tag)
            validate_start(self.engine, opts)
            config = build_start_config(command, opts)
        except ContainerzError as e:
            logger.warning(f"Start of {ref} rejected: {e}")
            raise
        logger.info(f"Resolved {ref} to image {resolved.id or 'unknown'}")

        try:
            created = self.engine.create_container(
                ref,
                config,
                name=opts.instance_name or None,
                platform=self.default_platform,
            )
        except ContainerzError:
            raise
        except Exception as e:
            raise InternalError(f"failed to create container: {e}") from e
        for warning in created.warnings:
            logger.warning(f"Engine warning for {created.id}: {warning}")
        logger.info(f"Created container {created.id} from {ref}")

        try:
            self.engine.start_container(created.id)
        except ContainerzError:
            logger.error(f"Container {created.id} created but failed to start; left in place")
            raise
        except Exception as e:
            logger.error(f"Container {created.id} created but failed to start; left in place")
            raise InternalError(f"failed to start container {created.id}: {e}") from e
        logger.info(f"Started container {created.id}")
        return created.id

    def start(self, request: StartRequest) -> str:
        return self.start_container(request.image, request.tag, request.command, *request.options)
