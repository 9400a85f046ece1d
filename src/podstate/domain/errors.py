"""Fault taxonomy for reconciliation calls.

Every fault carries the operation it came from and the identity it concerned,
when one is known, so callers can log a precise cause without re-deriving it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def _describe(operation: str, identity: str | None) -> str:
    if identity:
        return f"{operation} {identity}"
    return operation


class ReconcileError(RuntimeError):
    """Base class for faults surfaced by the reconciliation core."""

    def __init__(self, message: str, *, operation: str, identity: str | None = None) -> None:
        super().__init__(f"{_describe(operation, identity)}: {message}")
        self.operation = operation
        self.identity = identity


class TransportFailure(ReconcileError):
    """The request never produced an HTTP response (connection, timeout, TLS)."""


class RemoteRejected(ReconcileError):
    """The remote service answered with an error status."""

    def __init__(
        self,
        *,
        status: int,
        body: str,
        operation: str,
        identity: str | None = None,
    ) -> None:
        super().__init__(
            f"remote service rejected the request with status {status}: {body}",
            operation=operation,
            identity=identity,
        )
        self.status = status
        self.body = body


class NotFound(RemoteRejected):
    """The identity does not exist (anymore) at the remote service."""


class DecodeFailed(ReconcileError):
    """The response body did not match the expected shape."""


class ImmutableFieldChanged(ReconcileError):
    """The desired configuration changes a field that is fixed after create."""

    def __init__(
        self,
        *,
        field: str,
        prior: object,
        desired: object,
        operation: str,
        identity: str | None = None,
    ) -> None:
        super().__init__(
            f"{field} cannot change after create (current {prior!r}, desired {desired!r}); "
            "replace the resource instead",
            operation=operation,
            identity=identity,
        )
        self.field = field
        self.prior = prior
        self.desired = desired


class MissingRequiredField(ReconcileError):
    """A field the remote service requires on create was left unset."""

    def __init__(self, *, field: str, operation: str) -> None:
        super().__init__(f"{field} is required", operation=operation)
        self.field = field


class InPlaceUpdateRejected(ReconcileError):
    """An in-place update was requested for fields that need a full update."""

    def __init__(
        self,
        *,
        fields: Iterable[str],
        operation: str,
        identity: str | None = None,
    ) -> None:
        self.fields = tuple(sorted(fields))
        super().__init__(
            f"fields {', '.join(self.fields)} cannot be updated in place",
            operation=operation,
            identity=identity,
        )


class TimedOutWarning(UserWarning):
    """Deletion was acknowledged but not observed within the wait bound.

    Returned as part of a deletion result, never raised: the delete request
    itself succeeded, so the caller should still discard its local state.
    """

    def __init__(self, *, identity: str, waited_seconds: float) -> None:
        super().__init__(
            f"delete {identity}: not confirmed gone after {waited_seconds:.0f}s; "
            "the delete request was accepted"
        )
        self.identity = identity
        self.waited_seconds = waited_seconds


__all__ = [
    "DecodeFailed",
    "ImmutableFieldChanged",
    "InPlaceUpdateRejected",
    "MissingRequiredField",
    "NotFound",
    "ReconcileError",
    "RemoteRejected",
    "TimedOutWarning",
    "TransportFailure",
]
