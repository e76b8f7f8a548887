from typing import List

from pydantic import BaseModel, StrictInt

from src.service.ticketing.domain.enum.ticket_type import TicketType


class TicketTypeRequestSchema(BaseModel):
    ticket_type: TicketType
    no_of_tickets: StrictInt  # Purchase rules are checked by the use case, not here


class TicketPurchaseRequest(BaseModel):
    account_id: StrictInt
    ticket_type_requests: List[TicketTypeRequestSchema] = []

    model_config = {
        'json_schema_extra': {
            'example': {
                'account_id': 1,
                'ticket_type_requests': [
                    {'ticket_type': 'adult', 'no_of_tickets': 2},
                    {'ticket_type': 'child', 'no_of_tickets': 1},
                    {'ticket_type': 'infant', 'no_of_tickets': 1},
                ],
            }
        }
    }


class TicketPurchaseResponse(BaseModel):
    account_id: int
    seats_reserved: int
    total_price: int

    model_config = {
        'json_schema_extra': {
            'example': {
                'account_id': 1,
                'seats_reserved': 3,
                'total_price': 50,
            }
        }
    }
