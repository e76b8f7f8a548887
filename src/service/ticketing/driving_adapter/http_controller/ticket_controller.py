from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.purchase_tickets_use_case import PurchaseTicketsUseCase
from src.service.ticketing.domain.value_object.ticket_type_request import TicketTypeRequest
from src.service.ticketing.driving_adapter.http_controller.schema.ticket_schema import (
    TicketPurchaseRequest,
    TicketPurchaseResponse,
)


router = APIRouter()


@router.post('/purchase', status_code=status.HTTP_201_CREATED)
@Logger.io
async def purchase_tickets(
    request: TicketPurchaseRequest,
    use_case: PurchaseTicketsUseCase = Depends(PurchaseTicketsUseCase.depends),
) -> TicketPurchaseResponse:
    """Validate a ticket purchase, reserve the seats and take payment."""
    ticket_type_requests = [
        TicketTypeRequest(ticket_type=item.ticket_type, no_of_tickets=item.no_of_tickets)
        for item in request.ticket_type_requests
    ]
    receipt = use_case.purchase_tickets(request.account_id, *ticket_type_requests)

    return TicketPurchaseResponse(
        account_id=receipt.account_id,
        seats_reserved=receipt.seats_reserved,
        total_price=receipt.total_price,
    )
