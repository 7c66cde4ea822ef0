"""Ticket-type requests: one line of a purchase.

A TicketTypeRequest is an immutable Value Object. It validates itself on
construction, so an invalid request can never reach the ticket service.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ticket_service.domain.exceptions import InvalidTicketRequestError


class TicketType(Enum):
    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @property
    def occupies_seat(self) -> bool:
        """Infants sit on an adult's lap and are not allocated a seat."""
        return self is not TicketType.INFANT


@dataclass(frozen=True)
class TicketTypeRequest:
    """A request for ``count`` tickets of a single ``ticket_type``."""

    ticket_type: TicketType
    count: int

    def __post_init__(self) -> None:
        if self.ticket_type is None:
            raise InvalidTicketRequestError("Ticket type cannot be null")
        if not isinstance(self.ticket_type, TicketType):
            raise InvalidTicketRequestError(
                f"Unknown ticket type: {self.ticket_type!r}"
            )
        # bool is a subclass of int but never a meaningful ticket count
        if not isinstance(self.count, int) or isinstance(self.count, bool):
            raise InvalidTicketRequestError("Number of tickets must be an integer")
        if self.count <= 0:
            raise InvalidTicketRequestError(
                "Number of tickets must be greater than zero"
            )

    def __str__(self) -> str:
        return f"{self.ticket_type.value}x{self.count}"
