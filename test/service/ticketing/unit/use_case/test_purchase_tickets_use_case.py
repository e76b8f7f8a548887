"""
Unit tests for PurchaseTicketsUseCase

Tests:
- Input validation (account id, empty purchase, zero/negative tickets)
- Maximum tickets per purchase
- Infant/adult ratio and adult presence
- Seats reserved and amount charged for valid purchases
- Seats reserved before payment, no gateway call on rejection
"""

from unittest.mock import Mock, call

import pytest

from src.platform.exception.exceptions import DomainError, InvalidPurchaseError
from src.service.ticketing.app.command.purchase_tickets_use_case import PurchaseTicketsUseCase
from src.service.ticketing.app.dto.purchase_receipt import PurchaseReceipt
from src.service.ticketing.domain.enum.ticket_type import TicketType
from src.service.ticketing.domain.value_object.ticket_price_table import TicketPriceTable
from src.service.ticketing.domain.value_object.ticket_type_request import TicketTypeRequest


def adult(no_of_tickets: int) -> TicketTypeRequest:
    return TicketTypeRequest(ticket_type=TicketType.ADULT, no_of_tickets=no_of_tickets)


def child(no_of_tickets: int) -> TicketTypeRequest:
    return TicketTypeRequest(ticket_type=TicketType.CHILD, no_of_tickets=no_of_tickets)


def infant(no_of_tickets: int) -> TicketTypeRequest:
    return TicketTypeRequest(ticket_type=TicketType.INFANT, no_of_tickets=no_of_tickets)


@pytest.fixture
def assert_no_gateway_called(
    mock_seat_reservation_service: Mock, mock_ticket_payment_service: Mock
):
    yield
    mock_seat_reservation_service.reserve_seat.assert_not_called()
    mock_ticket_payment_service.make_payment.assert_not_called()


@pytest.mark.usefixtures('assert_no_gateway_called')
class TestInvalidInputs:
    @pytest.mark.parametrize('account_id', [0, -1, -100])
    def test_non_positive_account_id_is_rejected(
        self, use_case: PurchaseTicketsUseCase, account_id: int
    ):
        with pytest.raises(InvalidPurchaseError):
            use_case.purchase_tickets(account_id, adult(1))

    @pytest.mark.parametrize('account_id', [None, '1', 1.0, True])
    def test_non_integer_account_id_is_rejected(self, use_case: PurchaseTicketsUseCase, account_id):
        with pytest.raises(InvalidPurchaseError):
            use_case.purchase_tickets(account_id, adult(1))

    def test_no_ticket_requests_is_rejected(self, use_case: PurchaseTicketsUseCase):
        with pytest.raises(InvalidPurchaseError):
            use_case.purchase_tickets(1)

    def test_request_with_no_tickets_is_rejected(self, use_case: PurchaseTicketsUseCase):
        with pytest.raises(InvalidPurchaseError):
            use_case.purchase_tickets(1, adult(0))

    def test_request_with_negative_tickets_is_rejected(self, use_case: PurchaseTicketsUseCase):
        with pytest.raises(InvalidPurchaseError):
            use_case.purchase_tickets(1, adult(-5))

    def test_negative_request_cannot_be_offset_by_another_request(
        self, use_case: PurchaseTicketsUseCase
    ):
        with pytest.raises(InvalidPurchaseError):
            use_case.purchase_tickets(1, adult(-5), adult(7))

    @pytest.mark.parametrize('no_of_tickets', [1.5, True, None, '2'])
    def test_non_integer_number_of_tickets_is_rejected(
        self, use_case: PurchaseTicketsUseCase, no_of_tickets
    ):
        with pytest.raises(InvalidPurchaseError):
            use_case.purchase_tickets(1, adult(no_of_tickets))

    @pytest.mark.parametrize('request_', [child(0), infant(-1)])
    def test_zero_or_negative_child_or_infant_is_rejected(
        self, use_case: PurchaseTicketsUseCase, request_: TicketTypeRequest
    ):
        with pytest.raises(InvalidPurchaseError):
            use_case.purchase_tickets(1, adult(2), request_)


@pytest.mark.usefixtures('assert_no_gateway_called')
class TestMaximumTickets:
    def test_above_maximum_single_request_is_rejected(self, use_case: PurchaseTicketsUseCase):
        with pytest.raises(InvalidPurchaseError):
            use_case.purchase_tickets(1, adult(21))

    def test_multiple_requests_summing_above_maximum_are_rejected(
        self, use_case: PurchaseTicketsUseCase
    ):
        with pytest.raises(InvalidPurchaseError):
            use_case.purchase_tickets(1, adult(15), adult(6))

    def test_children_and_adults_above_maximum_are_rejected(
        self, use_case: PurchaseTicketsUseCase
    ):
        with pytest.raises(InvalidPurchaseError):
            use_case.purchase_tickets(1, child(10), adult(15))

    def test_infants_count_towards_maximum(self, use_case: PurchaseTicketsUseCase):
        with pytest.raises(InvalidPurchaseError):
            use_case.purchase_tickets(1, infant(10), adult(15))

    def test_custom_maximum_is_enforced(
        self, mock_seat_reservation_service: Mock, mock_ticket_payment_service: Mock
    ):
        use_case = PurchaseTicketsUseCase(
            seat_reservation_service=mock_seat_reservation_service,
            ticket_payment_service=mock_ticket_payment_service,
            max_tickets_per_purchase=4,
        )

        with pytest.raises(InvalidPurchaseError):
            use_case.purchase_tickets(1, adult(5))


@pytest.mark.usefixtures('assert_no_gateway_called')
class TestAccompaniedByAdult:
    @pytest.mark.parametrize(
        'requests',
        [
            [child(1)],
            [infant(1)],
            [child(3)],
            [infant(3)],
            [child(3), child(4)],
            [infant(3), infant(4)],
            [child(1), infant(1)],
        ],
    )
    def test_child_or_infant_without_adult_is_rejected(
        self, use_case: PurchaseTicketsUseCase, requests: list[TicketTypeRequest]
    ):
        with pytest.raises(InvalidPurchaseError):
            use_case.purchase_tickets(1, *requests)

    def test_more_infants_than_adults_is_rejected(self, use_case: PurchaseTicketsUseCase):
        with pytest.raises(InvalidPurchaseError):
            use_case.purchase_tickets(1, adult(1), infant(2))

    def test_infants_across_requests_are_summed(self, use_case: PurchaseTicketsUseCase):
        with pytest.raises(InvalidPurchaseError):
            use_case.purchase_tickets(1, adult(2), infant(2), infant(1))


class TestValidPurchase:
    @pytest.mark.parametrize(
        ('requests', 'expected_seats', 'expected_price'),
        [
            ([adult(1)], 1, 20),
            ([adult(10)], 10, 200),
            ([adult(20)], 20, 400),
            ([adult(5), adult(4)], 9, 180),
            ([child(1), adult(1)], 2, 30),
            ([child(5), adult(1)], 6, 70),
            ([adult(1), infant(1)], 1, 20),
            ([adult(4), child(2), infant(3)], 6, 100),
            ([infant(3), child(2), adult(4)], 6, 100),
            ([adult(10), infant(10)], 10, 200),
        ],
    )
    def test_reserves_seats_and_charges_total_price(
        self,
        use_case: PurchaseTicketsUseCase,
        mock_seat_reservation_service: Mock,
        mock_ticket_payment_service: Mock,
        requests: list[TicketTypeRequest],
        expected_seats: int,
        expected_price: int,
    ):
        receipt = use_case.purchase_tickets(1, *requests)

        mock_seat_reservation_service.reserve_seat.assert_called_once_with(1, expected_seats)
        mock_ticket_payment_service.make_payment.assert_called_once_with(1, expected_price)
        assert receipt == PurchaseReceipt(
            account_id=1, seats_reserved=expected_seats, total_price=expected_price
        )

    def test_seats_are_reserved_before_payment(
        self,
        use_case: PurchaseTicketsUseCase,
        mock_seat_reservation_service: Mock,
        mock_ticket_payment_service: Mock,
    ):
        manager = Mock()
        manager.attach_mock(mock_seat_reservation_service.reserve_seat, 'reserve_seat')
        manager.attach_mock(mock_ticket_payment_service.make_payment, 'make_payment')

        use_case.purchase_tickets(7, adult(2), child(1))

        assert manager.mock_calls == [call.reserve_seat(7, 3), call.make_payment(7, 50)]

    def test_uses_configured_price_table(
        self, mock_seat_reservation_service: Mock, mock_ticket_payment_service: Mock
    ):
        use_case = PurchaseTicketsUseCase(
            seat_reservation_service=mock_seat_reservation_service,
            ticket_payment_service=mock_ticket_payment_service,
            price_table=TicketPriceTable(adult=25, child=15, infant=5),
        )

        use_case.purchase_tickets(3, adult(2), child(1), infant(1))

        mock_ticket_payment_service.make_payment.assert_called_once_with(3, 70)

    def test_payment_failure_propagates_without_rollback(
        self,
        use_case: PurchaseTicketsUseCase,
        mock_seat_reservation_service: Mock,
        mock_ticket_payment_service: Mock,
    ):
        mock_ticket_payment_service.make_payment.side_effect = RuntimeError('gateway down')

        with pytest.raises(RuntimeError, match='gateway down'):
            use_case.purchase_tickets(1, adult(1))

        mock_seat_reservation_service.reserve_seat.assert_called_once_with(1, 1)


def test_invalid_purchase_error_is_a_400_domain_error(use_case: PurchaseTicketsUseCase):
    with pytest.raises(InvalidPurchaseError) as exc_info:
        use_case.purchase_tickets(0, adult(1))

    assert isinstance(exc_info.value, DomainError)
    assert exc_info.value.status_code == 400
