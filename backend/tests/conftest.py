"""Pytest configuration and fixtures."""

import pytest

from tests.entities import LaborOperationRecord, Part, ServiceTicket


@pytest.fixture
def valid_part() -> Part:
    """A part whose members are all within bounds."""
    return Part("PART-1", "Brake Pads", 45.99, 10)


@pytest.fixture
def invalid_part() -> Part:
    """A part violating name length, price and stock bounds."""
    return Part("PART-2", "", -10.0, -5)


@pytest.fixture
def labor_record() -> LaborOperationRecord:
    return LaborOperationRecord(
        record_id="LAB-1",
        description="Replace air filter",
        hours=0.5,
        hourly_rate=25.0,
    )


@pytest.fixture
def service_ticket() -> ServiceTicket:
    return ServiceTicket(ticket_id="SR-1", customer_name="Bob Johnson", labor_hours=1.5, description="Brake inspection")
