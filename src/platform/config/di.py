"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.ticketing.domain.value_object.ticket_price_table import TicketPriceTable
from src.service.ticketing.driven_adapter.thirdparty.seat_reservation_service_impl import (
    SeatReservationServiceImpl,
)
from src.service.ticketing.driven_adapter.thirdparty.ticket_payment_service_impl import (
    TicketPaymentServiceImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Ticket prices come from settings, not hard coded in the use case
    ticket_price_table = providers.Singleton(
        TicketPriceTable,
        adult=config_service.provided.ADULT_TICKET_PRICE,
        child=config_service.provided.CHILD_TICKET_PRICE,
        infant=config_service.provided.INFANT_TICKET_PRICE,
    )

    # Third-party gateways (stateless)
    seat_reservation_service = providers.Singleton(SeatReservationServiceImpl)
    ticket_payment_service = providers.Singleton(TicketPaymentServiceImpl)


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
