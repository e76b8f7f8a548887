import attrs

from src.service.ticketing.domain.enum.ticket_type import TicketType


@attrs.define(frozen=True)
class TicketTypeRequest:
    """
    Value Object for how many tickets of one type a purchaser asks for.

    no_of_tickets is taken as given; purchase rules are checked by the use case.
    """

    ticket_type: TicketType
    no_of_tickets: int
