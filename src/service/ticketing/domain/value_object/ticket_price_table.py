from typing import Any

import attrs

from src.service.ticketing.domain.enum.ticket_type import TicketType


def _validate_non_negative_price(_instance: Any, attribute: Any, value: int) -> None:
    if value < 0:
        raise ValueError(f'{attribute.name} price cannot be negative')


_price_validators = [attrs.validators.instance_of(int), _validate_non_negative_price]


@attrs.define(frozen=True)
class TicketPriceTable:
    """Unit price per ticket type (integer currency units)."""

    adult: int = attrs.field(default=20, validator=_price_validators)
    child: int = attrs.field(default=10, validator=_price_validators)
    infant: int = attrs.field(default=0, validator=_price_validators)

    def price_of(self, ticket_type: TicketType) -> int:
        match ticket_type:
            case TicketType.ADULT:
                return self.adult
            case TicketType.CHILD:
                return self.child
            case _:
                return self.infant
