from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_payment_service import ITicketPaymentService


class TicketPaymentServiceImpl(ITicketPaymentService):
    """In-process stand-in for the third-party payment gateway."""

    @Logger.io
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        Logger.base.info(
            f'💳 [PAYMENT GATEWAY] Charged {total_amount_to_pay} to account={account_id}'
        )
