from typing import Any, Self, Sequence

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import InvalidPurchaseError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.dto.purchase_receipt import PurchaseReceipt
from src.service.ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from src.service.ticketing.app.interface.i_ticket_payment_service import ITicketPaymentService
from src.service.ticketing.domain.value_object.ticket_price_table import TicketPriceTable
from src.service.ticketing.domain.value_object.ticket_purchase_summary import (
    TicketPurchaseSummary,
)
from src.service.ticketing.domain.value_object.ticket_type_request import TicketTypeRequest


class PurchaseTicketsUseCase:
    """
    Validates a ticket purchase against the business rules, then reserves
    seats and takes payment.

    Business rules:
    - Account id must be greater than zero
    - At least one ticket request, and no request for zero or fewer tickets
    - Between MIN and MAX tickets in total per purchase
    - No more infants than adults (infants sit on an adult's lap)
    - Child and infant tickets cannot be bought without an adult ticket
    """

    def __init__(
        self,
        *,
        seat_reservation_service: ISeatReservationService,
        ticket_payment_service: ITicketPaymentService,
        price_table: TicketPriceTable | None = None,
        min_tickets_per_purchase: int = 1,
        max_tickets_per_purchase: int = 20,
    ):
        self.seat_reservation_service = seat_reservation_service
        self.ticket_payment_service = ticket_payment_service
        self.price_table = price_table or TicketPriceTable()
        self.min_tickets_per_purchase = min_tickets_per_purchase
        self.max_tickets_per_purchase = max_tickets_per_purchase

    @classmethod
    @inject
    def depends(
        cls,
        seat_reservation_service: ISeatReservationService = Depends(
            Provide[Container.seat_reservation_service]
        ),
        ticket_payment_service: ITicketPaymentService = Depends(
            Provide[Container.ticket_payment_service]
        ),
        price_table: TicketPriceTable = Depends(Provide[Container.ticket_price_table]),
        settings: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            seat_reservation_service=seat_reservation_service,
            ticket_payment_service=ticket_payment_service,
            price_table=price_table,
            min_tickets_per_purchase=settings.MIN_TICKETS_PER_PURCHASE,
            max_tickets_per_purchase=settings.MAX_TICKETS_PER_PURCHASE,
        )

    @Logger.io
    def purchase_tickets(
        self, account_id: int, *ticket_type_requests: TicketTypeRequest
    ) -> PurchaseReceipt:
        self._validate_input_parameters(account_id, ticket_type_requests)

        summary = TicketPurchaseSummary.from_requests(ticket_type_requests)
        self._validate_number_of_tickets(summary)
        self._validate_infants_do_not_outnumber_adults(summary)
        self._validate_adult_ticket_present(summary)

        seats = summary.seats_to_reserve
        total_price = summary.total_price(self.price_table)
        Logger.base.info(f'💺 [PURCHASE] account={account_id} seats={seats} cost={total_price}')

        # Seats first so payment is never taken when no seats are left.
        # Nothing is rolled back if payment fails after the reservation.
        self.seat_reservation_service.reserve_seat(account_id, seats)
        self.ticket_payment_service.make_payment(account_id, total_price)

        Logger.base.info(f'✅ [PURCHASE] account={account_id} purchase completed')
        return PurchaseReceipt(account_id=account_id, seats_reserved=seats, total_price=total_price)

    def _validate_input_parameters(
        self, account_id: Any, ticket_type_requests: Sequence[TicketTypeRequest]
    ) -> None:
        if not self._is_positive_count(account_id):
            Logger.base.info(f'❌ [PURCHASE] Invalid account id: {account_id!r}')
            raise InvalidPurchaseError('Account id must be a positive integer')

        if not ticket_type_requests:
            Logger.base.info('❌ [PURCHASE] No ticket requests given')
            raise InvalidPurchaseError('At least one ticket request is required')

        if not all(
            self._is_positive_count(request.no_of_tickets) for request in ticket_type_requests
        ):
            Logger.base.info('❌ [PURCHASE] Ticket request with an invalid number of tickets')
            raise InvalidPurchaseError(
                'Each ticket request must be for a whole number of at least one ticket'
            )

        Logger.base.info('✅ [PURCHASE] Input parameters validated')

    @staticmethod
    def _is_positive_count(value: Any) -> bool:
        # bool is an int subclass
        return isinstance(value, int) and not isinstance(value, bool) and value > 0

    def _validate_number_of_tickets(self, summary: TicketPurchaseSummary) -> None:
        total_tickets = summary.total_tickets
        if not self.min_tickets_per_purchase <= total_tickets <= self.max_tickets_per_purchase:
            Logger.base.info(
                f'❌ [PURCHASE] Tried to purchase {total_tickets} tickets, '
                f'minimum is {self.min_tickets_per_purchase} and maximum is {self.max_tickets_per_purchase}'
            )
            raise InvalidPurchaseError(
                f'Between {self.min_tickets_per_purchase} and {self.max_tickets_per_purchase} '
                'tickets can be purchased at a time'
            )
        Logger.base.info('✅ [PURCHASE] Number of tickets within limits')

    def _validate_infants_do_not_outnumber_adults(self, summary: TicketPurchaseSummary) -> None:
        if summary.infant_tickets > summary.adult_tickets:
            Logger.base.info(
                f'❌ [PURCHASE] {summary.infant_tickets} infant tickets '
                f'for {summary.adult_tickets} adult tickets'
            )
            raise InvalidPurchaseError('Each infant must be accompanied by an adult')
        Logger.base.info('✅ [PURCHASE] At least one adult for each infant')

    def _validate_adult_ticket_present(self, summary: TicketPurchaseSummary) -> None:
        if summary.adult_tickets <= 0:
            Logger.base.info('❌ [PURCHASE] No adult ticket in purchase')
            raise InvalidPurchaseError(
                'Child and infant tickets cannot be purchased without an adult ticket'
            )
        Logger.base.info('✅ [PURCHASE] Adult ticket present')
