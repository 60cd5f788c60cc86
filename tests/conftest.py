"""
Pytest configuration and fixtures.
"""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from job_tracker.application.interfaces.repositories import (
    JobEntryRepositoryInterface,
)
from job_tracker.application.services.sheet_layout import header_row
from job_tracker.config.settings import Settings
from job_tracker.domain.entities.job_entry import JobEntry
from job_tracker.domain.value_objects.job_number import JobNumber
from job_tracker.domain.value_objects.job_status import JobStatus
from job_tracker.infrastructure.repositories.job_entry_repository import (
    SheetJobEntryRepository,
)
from job_tracker.infrastructure.sheets.memory import InMemorySheetStore

SHEET_NAME = "Sheet2"


def make_row(job_number: str, status: str = "Pending", price: str = "100.00") -> list:
    """Build a stored sheet row for a job number."""
    return [
        job_number,
        "Acme Corp",
        "Storefront banner",
        "Downtown",
        "Walk-in",
        "Dana",
        "3x6 ft",
        "2",
        "Banner",
        "2024-05-01",
        status,
        "2024-05-10",
        price,
        "105.00",
        "Pickup",
        "",
    ]


@pytest.fixture
def test_settings():
    """Test settings configuration."""
    return Settings(
        ENVIRONMENT="test",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        MOCK_SHEETS=True,
        GOOGLE_SHEET_NAME=SHEET_NAME,
        API_PREFIX="/api",
    )


@pytest.fixture
def sheet_store():
    """In-memory store holding a header row and two jobs."""
    return InMemorySheetStore(
        sheets={
            SHEET_NAME: [
                header_row(),
                make_row("ROPR1001", status="Pending"),
                make_row("DIGFI2001", status="In Progress", price="250.00"),
            ]
        },
        default_sheet=SHEET_NAME,
    )


@pytest.fixture
def job_entry_repository(sheet_store):
    """Repository over the in-memory store."""
    return SheetJobEntryRepository(sheet_store, SHEET_NAME)


@pytest.fixture
def mock_job_entry_repository():
    """Mock job entry repository."""
    mock_repo = AsyncMock(spec=JobEntryRepositoryInterface)

    mock_repo.get_rows = AsyncMock(return_value=[])
    mock_repo.list_entries = AsyncMock(return_value=[])
    mock_repo.job_number_exists = AsyncMock(return_value=False)
    mock_repo.find_row_number = AsyncMock(return_value=None)
    mock_repo.append = AsyncMock(return_value={"updates": {"updatedRows": 1}})
    mock_repo.update_field = AsyncMock(return_value={"updatedCells": 1})

    return mock_repo


@pytest.fixture
def client(test_settings, sheet_store):
    """Create test FastAPI client."""
    from fastapi.testclient import TestClient

    from job_tracker.api.app import create_app

    app = create_app(test_settings, sheet_store=sheet_store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_entry_payload():
    """Form payload as posted by the job entry form."""
    return {
        "jobNumber": "1002",
        "jobPrefix": "ROPR",
        "customerName": "Blue Bakery",
        "jobName": "Window decals",
        "jobLocation": "Harbor St",
        "jobSource": "Referral",
        "salesPerson": "Sam",
        "jobSize": "24x36 in",
        "quantity": "4",
        "jobCategory": "Vinyl",
        "jobBookedDate": "2024-06-03",
        "jobStatus": "Pending",
        "deliveryDate": "2024-06-12",
        "jobPrice": "200",
        "totalPrice": "999.99",
        "deliveryDetails": "Install on site",
        "remark": "Rush",
    }


@pytest.fixture
def sample_entry():
    """A valid job entry."""
    return JobEntry(
        job_number=JobNumber(prefix="ROPR", number="1003"),
        customer_name="Blue Bakery",
        job_name="Window decals",
        job_location="Harbor St",
        job_source="Referral",
        sales_person="Sam",
        job_size="24x36 in",
        quantity="4",
        job_category="Vinyl",
        job_booked_date=date(2024, 6, 3),
        job_status=JobStatus.PENDING,
        delivery_date=date(2024, 6, 12),
        job_price=Decimal("200"),
        delivery_details="Install on site",
    )
