from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)


class SeatReservationServiceImpl(ISeatReservationService):
    """In-process stand-in for the third-party seat booking gateway."""

    @Logger.io
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        Logger.base.info(
            f'🎫 [SEAT GATEWAY] Reserved {total_seats_to_allocate} seats for account={account_id}'
        )
