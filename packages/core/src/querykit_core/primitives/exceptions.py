"""
querykit error hierarchy.

Two branches hang off :class:`QueryKitError`: caller mistakes
(:class:`ValidationError` and below) and data-source failures
(:class:`InfrastructureError` and below). Adapters subclass the leaves so
callers can catch either the generic or the driver-specific type.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

_GENERAL = "__root__"


class QueryKitError(Exception):
    """Base for every error raised by querykit packages."""


class ValidationError(QueryKitError):
    """Caller input was rejected.

    ``errors`` maps a field name to its messages. A bare message is filed
    under ``"__root__"``.
    """

    def __init__(
        self, errors: Mapping[str, Sequence[str]] | str | None = None
    ) -> None:
        if errors is None:
            errors = {}
        elif isinstance(errors, str):
            errors = {_GENERAL: [errors]}
        self.errors: dict[str, list[str]] = {
            name: list(messages) for name, messages in errors.items()
        }
        super().__init__(str(self.errors))

    def messages_for(self, name: str) -> list[str]:
        return self.errors.get(name, [])


class InvalidRequestError(ValidationError):
    """A page window was malformed (negative offset, limit below one).

    Raised while the request is built, before any data source is touched.
    """


class InfrastructureError(QueryKitError):
    """Something outside the process failed."""


class PersistenceError(InfrastructureError):
    """A storage backend failed."""


class DataAccessError(PersistenceError):
    """A page fetch or a count could not be completed.

    ``operation`` names the failing call (``"fetch"`` or ``"count"``) when the
    raising adapter knows it. The paging layer lets this error through as is.
    """

    def __init__(self, message: str, *, operation: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation
