"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so callers can catch them uniformly. Purchase-rule errors carry a fixed
message because consumers assert on the text.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidTicketRequestError(ValidationError, ValueError):
    """A ticket-type request could not be constructed."""


class InvalidPurchaseError(ValidationError):
    """A purchase request was rejected before any collaborator was called."""

    message = "Invalid purchase"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class InvalidAccountError(InvalidPurchaseError):
    message = "Invalid account id"


class EmptyRequestError(InvalidPurchaseError):
    message = "At least one ticket must be requested"


class NullTicketRequestError(InvalidPurchaseError):
    message = "Ticket request cannot be null"


class TooManyTicketsError(InvalidPurchaseError):
    message = "Cannot purchase more than 25 tickets at once"


class AdultRequiredError(InvalidPurchaseError):
    message = "Child or Infant tickets require at least one Adult ticket"
