"""In-memory fake collaborators for testing.

These implement the same abstract interfaces as the real payment and
seat-reservation services but only record what they were asked to do.
Both fakes can share one journal so call order is observable.
"""

from __future__ import annotations

from ticket_service.domain.gateway.seat_reservation_service import (
    SeatReservationService,
)
from ticket_service.domain.gateway.ticket_payment_service import (
    TicketPaymentService,
)


class FakeTicketPaymentService(TicketPaymentService):

    def __init__(self, journal: list[tuple] | None = None) -> None:
        self.journal: list[tuple] = journal if journal is not None else []
        self.payments: list[tuple[int, int]] = []

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        self.payments.append((account_id, total_amount_to_pay))
        self.journal.append(("make_payment", account_id, total_amount_to_pay))


class FakeSeatReservationService(SeatReservationService):

    def __init__(self, journal: list[tuple] | None = None) -> None:
        self.journal: list[tuple] = journal if journal is not None else []
        self.reservations: list[tuple[int, int]] = []

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        self.reservations.append((account_id, total_seats_to_allocate))
        self.journal.append(("reserve_seat", account_id, total_seats_to_allocate))
