"""PurchaseOrder aggregate: one admissible ticket purchase.

A PurchaseOrder exists only once every purchase rule has passed, so the
amount and seat figures it exposes are always safe to hand to the
payment and seat-reservation services.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from types import MappingProxyType

from ticket_service.domain.exceptions import (
    AdultRequiredError,
    EmptyRequestError,
    InvalidAccountError,
    NullTicketRequestError,
    TooManyTicketsError,
)
from ticket_service.domain.model.ticket_type_request import (
    TicketType,
    TicketTypeRequest,
)

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
TICKET_PRICES = MappingProxyType({
    TicketType.ADULT: 25,
    TicketType.CHILD: 15,
    TicketType.INFANT: 0,
})
MAX_TICKETS_PER_PURCHASE = 25


@dataclass(frozen=True)
class PurchaseOrder:
    """An account id plus the ticket requests it is buying.

    Use ``PurchaseOrder.create()`` to build one from caller input; it
    applies the purchase rules in a fixed order and the first failing
    rule decides the error.
    """

    account_id: int
    requests: tuple[TicketTypeRequest, ...]

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        account_id: int | None,
        requests: Sequence[TicketTypeRequest | None] | None,
    ) -> PurchaseOrder:
        """Validate caller input and return an admissible order."""
        if (
            account_id is None
            or not isinstance(account_id, int)
            or isinstance(account_id, bool)
            or account_id <= 0
        ):
            raise InvalidAccountError()

        if requests is None or all(request is None for request in requests):
            raise EmptyRequestError()

        if any(request is None for request in requests):
            raise NullTicketRequestError()

        order = PurchaseOrder(account_id=account_id, requests=tuple(requests))

        if order.total_tickets > MAX_TICKETS_PER_PURCHASE:
            raise TooManyTicketsError()

        if order.child_count + order.infant_count > 0 and order.adult_count == 0:
            raise AdultRequiredError()

        return order

    # --- Computed properties --------------------------------------------------

    def count_of(self, ticket_type: TicketType) -> int:
        return sum(r.count for r in self.requests if r.ticket_type is ticket_type)

    @property
    def adult_count(self) -> int:
        return self.count_of(TicketType.ADULT)

    @property
    def child_count(self) -> int:
        return self.count_of(TicketType.CHILD)

    @property
    def infant_count(self) -> int:
        return self.count_of(TicketType.INFANT)

    @property
    def total_tickets(self) -> int:
        return sum(r.count for r in self.requests)

    @property
    def total_amount(self) -> int:
        return sum(r.count * TICKET_PRICES[r.ticket_type] for r in self.requests)

    @property
    def total_seats(self) -> int:
        return sum(r.count for r in self.requests if r.ticket_type.occupies_seat)
