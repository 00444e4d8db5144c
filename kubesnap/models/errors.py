"""Exception types raised by kubesnap operations."""


class KubeSnapError(Exception):
    """Base exception for kubesnap errors."""


class UnsupportedKindError(KubeSnapError, KeyError):
    """Raised when a resource kind is outside the supported catalog."""

    def __init__(self, kind: str) -> None:
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return f"Unsupported resource kind: {self.kind!r}"


class InvalidQueryError(KubeSnapError, ValueError):
    """Raised when a search or report request has an unusable selection."""


class SnapshotLoadError(KubeSnapError):
    """Raised when a snapshot file cannot be read or decoded."""


class ReportFormatError(KubeSnapError):
    """Raised when a pre-computed report does not have the expected shape."""


__all__ = [
    "InvalidQueryError",
    "KubeSnapError",
    "ReportFormatError",
    "SnapshotLoadError",
    "UnsupportedKindError",
]
