"""Ticketing Domain Value Objects"""

from src.service.ticketing.domain.value_object.ticket_price_table import TicketPriceTable
from src.service.ticketing.domain.value_object.ticket_purchase_summary import (
    TicketPurchaseSummary,
)
from src.service.ticketing.domain.value_object.ticket_type_request import TicketTypeRequest

__all__ = ['TicketPriceTable', 'TicketPurchaseSummary', 'TicketTypeRequest']
