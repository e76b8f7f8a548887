from collections import Counter
from typing import Iterable, Self

import attrs

from src.service.ticketing.domain.enum.ticket_type import TicketType
from src.service.ticketing.domain.value_object.ticket_price_table import TicketPriceTable
from src.service.ticketing.domain.value_object.ticket_type_request import TicketTypeRequest


@attrs.define(frozen=True)
class TicketPurchaseSummary:
    """
    Ticket counts per type, aggregated in one pass over the purchase requests.

    Business rules:
    - Infants are not allocated a seat, they sit on an adult's lap
    - Price is no_of_tickets * unit price of the ticket type
    """

    adult_tickets: int = 0
    child_tickets: int = 0
    infant_tickets: int = 0

    @classmethod
    def from_requests(cls, ticket_type_requests: Iterable[TicketTypeRequest]) -> Self:
        counts: Counter[TicketType] = Counter()
        for request in ticket_type_requests:
            counts[request.ticket_type] += request.no_of_tickets

        return cls(
            adult_tickets=counts[TicketType.ADULT],
            child_tickets=counts[TicketType.CHILD],
            infant_tickets=counts[TicketType.INFANT],
        )

    def count_of(self, ticket_type: TicketType) -> int:
        match ticket_type:
            case TicketType.ADULT:
                return self.adult_tickets
            case TicketType.CHILD:
                return self.child_tickets
            case _:
                return self.infant_tickets

    @property
    def total_tickets(self) -> int:
        return self.adult_tickets + self.child_tickets + self.infant_tickets

    @property
    def seats_to_reserve(self) -> int:
        return self.total_tickets - self.infant_tickets

    def total_price(self, price_table: TicketPriceTable) -> int:
        return sum(
            self.count_of(ticket_type) * price_table.price_of(ticket_type)
            for ticket_type in TicketType
        )
