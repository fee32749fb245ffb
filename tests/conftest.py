"""Pytest fixtures for testing"""

import pytest
import httpx
from fastapi.testclient import TestClient
from homeloan_gateway.api.main import create_app
from homeloan_gateway.api.dependencies import get_lead_sink, get_product_client
from homeloan_gateway.infrastructure.clients.products import ProductClient
from homeloan_gateway.infrastructure.leads import InMemoryLeadSink


@pytest.fixture
def product_payload() -> dict:
    """Catalogue response shaped like dummyjson.com/products/1"""
    return {
        "id": 1,
        "title": "Essence Mascara Lash Princess",
        "description": "A popular mascara known for its volumizing effects.",
        "category": "beauty",
        "price": 9.99,
        "discountPercentage": 10.0,
        "rating": 4.94,
        "stock": 5,
        "brand": "Essence",
        "thumbnail": "https://cdn.dummyjson.com/products/images/beauty/thumbnail.png",
        "availabilityStatus": "Low Stock",
    }


@pytest.fixture
def lead_sink() -> InMemoryLeadSink:
    return InMemoryLeadSink()


@pytest.fixture
def product_handler(product_payload: dict):
    """Mock catalogue: serves product 1, 404 for anything else"""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/products/1":
            return httpx.Response(200, json=product_payload)
        return httpx.Response(404, json={"message": "Product not found"})

    return handler


@pytest.fixture
def client(lead_sink: InMemoryLeadSink, product_handler) -> TestClient:
    """Create FastAPI test client with in-memory lead sink and mocked catalogue"""
    app = create_app()

    def override_get_product_client():
        return ProductClient(
            base_url="http://catalogue.test",
            max_retries=1,
            backoff_base=0,
            transport=httpx.MockTransport(product_handler),
        )

    app.dependency_overrides[get_lead_sink] = lambda: lead_sink
    app.dependency_overrides[get_product_client] = override_get_product_client
    return TestClient(app)


@pytest.fixture
def valid_lead() -> dict:
    return {
        "name": "Asha Rao",
        "email": "asha@example.com",
        "phone": "9876543210",
        "propertyValue": 7500000,
        "monthlySalary": 150000,
    }
