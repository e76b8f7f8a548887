"""Ticket Type Enum"""

from enum import StrEnum


class TicketType(StrEnum):
    ADULT = 'adult'
    CHILD = 'child'
    INFANT = 'infant'  # No seat, sits on an adult's lap
