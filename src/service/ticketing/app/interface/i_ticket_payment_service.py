"""
Ticket Payment Service Interface

Third-party payment gateway. Assumed to always succeed.
"""

from abc import ABC, abstractmethod


class ITicketPaymentService(ABC):
    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        pass
