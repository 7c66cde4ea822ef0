"""Application service: Purchase Tickets use case.

Orchestrates the PurchaseOrder aggregate (rule validation, pricing and
seat count) and the two external collaborators. Payment is taken before
seats are reserved, and neither collaborator is touched unless the
order is admissible.
"""

from __future__ import annotations

import logging

from ticket_service.domain.exceptions import InvalidPurchaseError
from ticket_service.domain.gateway.seat_reservation_service import (
    SeatReservationService,
)
from ticket_service.domain.gateway.ticket_payment_service import (
    TicketPaymentService,
)
from ticket_service.domain.model.purchase_order import PurchaseOrder
from ticket_service.domain.model.ticket_type_request import TicketTypeRequest

logger = logging.getLogger(__name__)


class TicketService:

    def __init__(
        self,
        payment_service: TicketPaymentService,
        reservation_service: SeatReservationService,
    ) -> None:
        self._payment_service = payment_service
        self._reservation_service = reservation_service

    def purchase_tickets(
        self,
        account_id: int | None,
        *ticket_type_requests: TicketTypeRequest | None,
    ) -> None:
        """Purchase tickets for an account.

        Raises an InvalidPurchaseError subclass, without charging or
        reserving anything, if the purchase breaks a rule.
        """
        try:
            order = PurchaseOrder.create(account_id, ticket_type_requests)
        except InvalidPurchaseError as exc:
            logger.warning("Purchase rejected for account %r: %s", account_id, exc)
            raise

        self._payment_service.make_payment(order.account_id, order.total_amount)
        self._reservation_service.reserve_seat(order.account_id, order.total_seats)

        logger.info(
            "Purchased %d ticket(s) for account %d: charged %d, reserved %d seat(s)",
            order.total_tickets,
            order.account_id,
            order.total_amount,
            order.total_seats,
        )
