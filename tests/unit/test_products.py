"""Unit tests for product display pricing and the catalogue client"""

import httpx
import pytest
from unittest.mock import AsyncMock, patch
from homeloan_gateway.domain.models import Product
from homeloan_gateway.domain.products import build_product_display, stock_level
from homeloan_gateway.domain.exceptions import ProductAPIError
from homeloan_gateway.infrastructure.clients.products import ProductClient, parse_product


def test_build_product_display_discount():
    display = build_product_display(Product(id=1, price=90.0, discount_percentage=10.0, rating=4.6, stock=60))

    assert display.original_price == 100.0
    assert display.savings == 10.0
    assert display.has_discount is True
    assert display.stock_level == "high"
    assert display.rating_stars == 4


def test_build_product_display_no_discount():
    display = build_product_display(Product(id=2, price=25.5))

    assert display.original_price == 25.5
    assert display.savings == 0
    assert display.has_discount is False
    assert display.rating_stars == 0


def test_build_product_display_full_discount_keeps_price():
    display = build_product_display(Product(id=3, price=0.0, discount_percentage=100.0))
    assert display.original_price == 0.0


def test_stock_level_buckets():
    assert stock_level(51) == "high"
    assert stock_level(50) == "medium"
    assert stock_level(21) == "medium"
    assert stock_level(20) == "low"
    assert stock_level(0) == "low"


def test_parse_product_tolerates_missing_fields():
    product = parse_product({"id": 7, "title": "Lamp"})

    assert product.id == 7
    assert product.title == "Lamp"
    assert product.price == 0.0
    assert product.brand == ""


async def test_product_client_returns_product(product_handler):
    client = ProductClient(base_url="http://catalogue.test", transport=httpx.MockTransport(product_handler))
    product = await client.get_product(1)

    assert product.id == 1
    assert product.brand == "Essence"
    assert product.discount_percentage == 10.0


async def test_product_client_not_found_does_not_retry(product_handler):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return product_handler(request)

    client = ProductClient(base_url="http://catalogue.test", max_retries=3, transport=httpx.MockTransport(handler))
    with pytest.raises(ProductAPIError, match="404"):
        await client.get_product(999)
    assert len(calls) == 1


@patch("homeloan_gateway.infrastructure.clients.products.asyncio.sleep", new_callable=AsyncMock)
async def test_product_client_retries_server_errors(mock_sleep: AsyncMock, product_payload: dict):
    responses = [httpx.Response(502), httpx.Response(503), httpx.Response(200, json=product_payload)]

    def handler(request: httpx.Request) -> httpx.Response:
        return responses.pop(0)

    client = ProductClient(
        base_url="http://catalogue.test",
        max_retries=3,
        backoff_base=1.0,
        transport=httpx.MockTransport(handler),
    )
    product = await client.get_product(1)

    assert product.title == product_payload["title"]
    # Exponential backoff: 1s, 2s
    assert [call.args[0] for call in mock_sleep.await_args_list] == [1.0, 2.0]


@patch("homeloan_gateway.infrastructure.clients.products.asyncio.sleep", new_callable=AsyncMock)
async def test_product_client_gives_up_on_network_failure(mock_sleep: AsyncMock):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = ProductClient(base_url="http://catalogue.test", max_retries=2, transport=httpx.MockTransport(handler))
    with pytest.raises(ProductAPIError, match="unreachable"):
        await client.get_product(1)
    assert mock_sleep.await_count == 1


async def test_product_client_rejects_non_object_payload():
    client = ProductClient(
        base_url="http://catalogue.test",
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json=[1, 2, 3])),
    )
    with pytest.raises(ProductAPIError, match="expected a JSON object"):
        await client.get_product(1)


async def test_product_client_rejects_invalid_json():
    client = ProductClient(
        base_url="http://catalogue.test",
        transport=httpx.MockTransport(lambda request: httpx.Response(200, content=b"<html>")),
    )
    with pytest.raises(ProductAPIError, match="Invalid product data"):
        await client.get_product(1)
