"""Abstract payment collaborator.

Defined in the domain layer so the domain never depends on a concrete
payment provider. Implementations live outside this package.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class TicketPaymentService(ABC):

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """Charge ``total_amount_to_pay`` against ``account_id``."""
