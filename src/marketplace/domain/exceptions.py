"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A required field is missing/malformed or an invariant was violated."""


class ConflictError(DomainException):
    """A unique account attribute (username, email) is already taken."""


class AuthenticationError(DomainException):
    """Bad credentials, or a missing/invalid/expired token."""


class AuthorizationError(DomainException):
    """The actor has the wrong kind or does not own the target resource."""


class NotFoundError(DomainException):
    """A requested order or account does not exist."""


class InvalidTransitionError(DomainException):
    """An order status change is not permitted from the current state.

    ``allowed`` lists the statuses that *are* legal from ``current`` so the
    caller can recover without another round trip.
    """

    def __init__(self, order_id: str, current: str, requested: str, allowed: list[str]) -> None:
        self.order_id = order_id
        self.current = current
        self.requested = requested
        self.allowed = list(allowed)
        if self.allowed:
            hint = f"allowed: {', '.join(self.allowed)}"
        else:
            hint = f"{current} is a final status"
        super().__init__(
            f"Cannot move order {order_id} from {current} to {requested} ({hint})"
        )


class PersistenceError(DomainException):
    """The underlying store failed. Safe for the caller to retry."""
