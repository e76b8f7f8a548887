"""
Seat Reservation Service Interface

Third-party seat booking gateway. Assumed to always succeed.
"""

from abc import ABC, abstractmethod


class ISeatReservationService(ABC):
    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        pass
