"""Ticketing Domain Enums"""

from src.service.ticketing.domain.enum.ticket_type import TicketType

__all__ = ['TicketType']
