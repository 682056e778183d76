"""Shared exception types for the pvfs bridge."""

from __future__ import annotations


class PvfsError(RuntimeError):
    """Base exception for pvfs bridge errors."""

    def __init__(self, message: str, *, error_code: str = "pvfs_error") -> None:
        super().__init__(message)
        self.error_code = error_code


class UnknownProfileError(PvfsError):
    """No connection profile is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Could not find named VFS connection: '{name}'", error_code="UNKNOWN_PROFILE")
        self.name = name


class MalformedPvfsUriError(PvfsError):
    """URI is missing a scheme, an authority or a required path segment."""

    def __init__(self, message: str, *, error_code: str = "MALFORMED_PVFS_URI") -> None:
        super().__init__(message, error_code=error_code)


class MalformedObjectStorePathError(MalformedPvfsUriError):
    """Object-store URI path does not start with a bucket segment."""

    def __init__(self, uri: str) -> None:
        super().__init__(
            f"Object-store path must be of the form /<bucket>/<key>: '{uri}'",
            error_code="MALFORMED_OBJECT_STORE_PATH",
        )
        self.uri = uri


class MissingCredentialsError(PvfsError):
    """Static keys are empty and no usable credentials file is available."""

    def __init__(self, message: str) -> None:
        super().__init__(message, error_code="MISSING_CREDENTIALS")


class ProfileAccessError(PvfsError):
    """A connection profile attribute could not be read."""

    def __init__(self, attribute: str, cause: BaseException | None = None) -> None:
        detail = f": {cause}" if cause is not None else ""
        super().__init__(
            f"Failed to read connection attribute '{attribute}'{detail}",
            error_code="PROFILE_ACCESS",
        )
        self.attribute = attribute


class NotInitializedError(PvfsError):
    """The delegating filesystem has no backend to forward to."""

    def __init__(self, message: str, *, error_code: str = "NOT_INITIALIZED") -> None:
        super().__init__(message, error_code=error_code)


class BackendMismatchError(NotInitializedError):
    """A path names a different connection than the one already pinned."""

    def __init__(self, pinned: str, requested: str) -> None:
        super().__init__(
            f"Filesystem is bound to connection '{pinned}' and cannot serve '{requested}'",
            error_code="BACKEND_MISMATCH",
        )
        self.pinned = pinned
        self.requested = requested
