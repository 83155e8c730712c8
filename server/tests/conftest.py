"""Test configuration and fixtures."""

from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tourdesk.core.config import settings
from tourdesk.core.storage import EntityStore, get_store


@pytest.fixture
def store():
    """A fresh, empty entity store."""
    return EntityStore()


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    """Point uploads at a temporary directory."""
    target = tmp_path / "uploads"
    monkeypatch.setattr(settings, "upload_dir", str(target))
    return target


@pytest_asyncio.fixture(scope="function")
async def test_app(store, upload_dir):
    """Create a test FastAPI application."""
    from fastapi import FastAPI
    from fastapi.exceptions import RequestValidationError

    from tourdesk.core.exceptions import (
        ProblemDetailsException,
        generic_exception_handler,
        problem_details_handler,
        request_validation_handler,
    )
    from tourdesk.routers import export, file, metrics, stats, tour, tourist, transaction

    # Simplified test app without lifespan or middleware
    app = FastAPI(
        title="Tour Desk API (Test)",
        version="1.0.0-test",
    )

    app.add_exception_handler(ProblemDetailsException, problem_details_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(stats.router)
    app.include_router(tour.router)
    app.include_router(tourist.router)
    app.include_router(transaction.router)
    app.include_router(file.router)
    app.include_router(export.router)
    app.include_router(metrics.router)

    # Each test gets its own store
    app.dependency_overrides[get_store] = lambda: store

    yield app

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def test_client(test_app):
    """Create a test HTTP client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_tour_data():
    """Sample tour payload as the front end sends it."""
    return {
        "name": "Northern Lights Adventure",
        "description": "Experience the Aurora Borealis in Iceland",
        "location": "Reykjavik, Iceland",
        "startDate": "2025-01-10",
        "endDate": "2025-01-17",
        "capacity": 20,
        "price": "1499.00",
        "status": "active",
    }


@pytest.fixture
def sample_tourist_data():
    """Sample tourist payload as the front end sends it."""
    return {
        "name": "Ana Souza",
        "email": "ana.souza@example.com",
        "phone": "+55 11 5555-0100",
        "nationality": "Brazilian",
        "bookingDate": "2024-11-02",
        "status": "confirmed",
    }


@pytest.fixture
def sample_transaction_data():
    """Sample transaction payload as the front end sends it."""
    return {
        "type": "income",
        "category": "tour-bookings",
        "description": "Deposit for Northern Lights group",
        "amount": "100.00",
        "date": "2024-11-05",
    }


@pytest.fixture
def tour_fields():
    """Store-level fields for a tour."""
    from datetime import date

    return {
        "name": "Sahara Trek",
        "description": None,
        "location": "Merzouga, Morocco",
        "start_date": date(2025, 3, 1),
        "end_date": date(2025, 3, 6),
        "capacity": 12,
        "price": Decimal("899.50"),
        "status": "active",
    }


@pytest.fixture
def tourist_fields():
    """Store-level fields for a tourist."""
    from datetime import date

    return {
        "name": "Kenji Watanabe",
        "email": "kenji@example.com",
        "phone": None,
        "nationality": "Japanese",
        "tour_id": None,
        "booking_date": date(2025, 1, 20),
        "status": "pending",
    }
