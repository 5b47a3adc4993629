"""Error types raised by beltkit helpers.

Domain and infrastructure code raise these; the service layer converts
them to :class:`~beltkit.services.result.ServiceError` using ``code``.
"""

from __future__ import annotations


class BeltError(Exception):
    """Base class for all beltkit failures."""

    code = "BELT_ERROR"


class ResourceCreationError(BeltError):
    """The OS refused to create a temporary file or directory."""

    code = "RESOURCE_CREATION_FAILED"


class EntropySourceUnavailable(BeltError):
    """The secure random source could not be read."""

    code = "ENTROPY_UNAVAILABLE"


class ResolutionDegenerate(UserWarning):
    """HOME is unset or empty, so fallback home paths are degenerate.

    Issued through :func:`warnings.warn`; never fatal.
    """

    code = "RESOLUTION_DEGENERATE"
