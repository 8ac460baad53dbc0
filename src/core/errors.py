"""Error hierarchy for the bootstrap pipeline.

Why a dedicated module:
- Every step reports failures with one of a closed set of kinds; the
  orchestrator only needs `kind` and `fatal` to decide whether to continue.
- Adapters raise collaborator errors (`VcsError`, `PackageToolError`,
  `DownloadError`) and the steps translate them into kinds.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_INPUT = "InvalidInput"
    MISSING_CREDENTIAL = "MissingCredential"
    ALREADY_EXISTS = "AlreadyExists"
    IO_ERROR = "IoError"
    VCS_CONFIG_ERROR = "VcsConfigError"
    DOWNLOAD_FAILED = "DownloadFailed"
    PROVISIONER_UNAVAILABLE = "ProvisionerUnavailable"
    ENV_SETUP_FAILED = "EnvSetupFailed"
    AUTH_FAILED = "AuthFailed"
    NAME_CONFLICT = "NameConflict"
    NETWORK_ERROR = "NetworkError"


_NON_FATAL_KINDS = frozenset(
    {
        ErrorKind.VCS_CONFIG_ERROR,
        ErrorKind.DOWNLOAD_FAILED,
        ErrorKind.ENV_SETUP_FAILED,
    }
)


def is_fatal(kind: ErrorKind) -> bool:
    return kind not in _NON_FATAL_KINDS


class BootstrapError(Exception):
    """Base class of every error the pipeline knows how to classify."""

    kind: ErrorKind = ErrorKind.IO_ERROR

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint

    @property
    def fatal(self) -> bool:
        return is_fatal(self.kind)


class InvalidInputError(BootstrapError):
    kind = ErrorKind.INVALID_INPUT


class MissingCredentialError(BootstrapError):
    kind = ErrorKind.MISSING_CREDENTIAL


class AlreadyExistsError(BootstrapError):
    kind = ErrorKind.ALREADY_EXISTS


class FileWriteError(BootstrapError):
    kind = ErrorKind.IO_ERROR


class VcsConfigError(BootstrapError):
    kind = ErrorKind.VCS_CONFIG_ERROR


class DownloadFailedError(BootstrapError):
    kind = ErrorKind.DOWNLOAD_FAILED


class ProvisionerUnavailableError(BootstrapError):
    kind = ErrorKind.PROVISIONER_UNAVAILABLE


class EnvSetupFailedError(BootstrapError):
    kind = ErrorKind.ENV_SETUP_FAILED


class AuthFailedError(BootstrapError):
    kind = ErrorKind.AUTH_FAILED


class NameConflictError(BootstrapError):
    kind = ErrorKind.NAME_CONFLICT


class NetworkError(BootstrapError):
    kind = ErrorKind.NETWORK_ERROR


# Collaborator failures. These are not classified on their own: the step that
# calls the collaborator decides which kind they map to.


class VcsError(Exception):
    """A version-control command failed."""


class PackageToolError(Exception):
    """The package/environment tool could not be run or installed."""


class DownloadError(Exception):
    """A boilerplate download did not produce a body."""
