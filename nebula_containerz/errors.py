# nebula_containerz/errors.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)


class ContainerzError(RuntimeError):
    """Base for every error surfaced by the start path.

    `code` follows the gRPC status names used across Nebula services,
    `status_code` is what the HTTP layer answers with.
    """

    code = "INTERNAL"
    status_code = 500


class InvalidArgumentError(ContainerzError):
    code = "INVALID_ARGUMENT"
    status_code = 400


class NotFoundError(ContainerzError):
    code = "NOT_FOUND"
    status_code = 404


class AlreadyExistsError(ContainerzError):
    code = "ALREADY_EXISTS"
    status_code = 409


class FailedPreconditionError(ContainerzError):
    code = "FAILED_PRECONDITION"
    status_code = 400


class UnavailableError(ContainerzError):
    code = "UNAVAILABLE"
    status_code = 503


class InternalError(ContainerzError):
    pass
