"""
Test Configuration and Fixtures

This module provides:
- Test environment setup (log directory) before application modules load
- Mocked third-party gateways and a use case built on them
- FastAPI TestClient with the DI container's gateways overridden

Architecture:
- Unit tests (test/**/unit/): use the mocked gateways directly
- Integration tests: go through the FastAPI app and the DI container
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# src.platform.logging.loguru_io_config reads TEST_LOG_DIR at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('DEPLOY_ENV', 'test')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from unittest.mock import Mock  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.service.ticketing.app.command.purchase_tickets_use_case import (  # noqa: E402
    PurchaseTicketsUseCase,
)
from src.service.ticketing.app.interface.i_seat_reservation_service import (  # noqa: E402
    ISeatReservationService,
)
from src.service.ticketing.app.interface.i_ticket_payment_service import (  # noqa: E402
    ITicketPaymentService,
)


@pytest.fixture
def mock_seat_reservation_service() -> Mock:
    return Mock(spec=ISeatReservationService)


@pytest.fixture
def mock_ticket_payment_service() -> Mock:
    return Mock(spec=ITicketPaymentService)


@pytest.fixture
def use_case(
    mock_seat_reservation_service: Mock, mock_ticket_payment_service: Mock
) -> PurchaseTicketsUseCase:
    return PurchaseTicketsUseCase(
        seat_reservation_service=mock_seat_reservation_service,
        ticket_payment_service=mock_ticket_payment_service,
    )


@pytest.fixture
def client(
    mock_seat_reservation_service: Mock, mock_ticket_payment_service: Mock
) -> Generator[TestClient, None, None]:
    """TestClient with the third-party gateways replaced by mocks"""
    from src.service.ticketing.main import app

    with (
        container.seat_reservation_service.override(mock_seat_reservation_service),
        container.ticket_payment_service.override(mock_ticket_payment_service),
        TestClient(app) as test_client,
    ):
        yield test_client
