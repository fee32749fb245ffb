"""Product catalogue HTTP client with exponential backoff retry logic"""

import asyncio
import logging
from typing import Any, Dict

import httpx

from homeloan_gateway.domain.models import Product
from homeloan_gateway.domain.exceptions import ProductAPIError
from homeloan_gateway.config import settings
from homeloan_gateway.infrastructure.observability.metrics import (
    product_fetch_latency_histogram,
    product_fetch_failures_counter,
)

logger = logging.getLogger(__name__)


def parse_product(data: Dict[str, Any]) -> Product:
    """Build a Product from a catalogue payload, defaulting missing fields"""
    return Product(
        id=int(data.get("id") or 0),
        title=str(data.get("title") or ""),
        description=str(data.get("description") or ""),
        category=str(data.get("category") or ""),
        price=float(data.get("price") or 0.0),
        discount_percentage=float(data.get("discountPercentage") or 0.0),
        rating=float(data.get("rating") or 0.0),
        stock=int(data.get("stock") or 0),
        brand=str(data.get("brand") or ""),
        thumbnail=str(data.get("thumbnail") or ""),
        availability_status=str(data.get("availabilityStatus") or ""),
    )


class ProductClient:
    """Client for the external product catalogue API"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_base: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.product_api_base).rstrip("/")
        self.timeout = timeout or settings.http_timeout_seconds
        self.max_retries = max_retries or settings.product_fetch_max_retries
        self.backoff_base = settings.product_fetch_backoff_base if backoff_base is None else backoff_base
        self.transport = transport

    async def get_product(self, product_id: int) -> Product:
        """
        Fetch a single product by id.

        Retry strategy:
        - Exponential backoff: base, 2*base, 4*base, ...
        - Retries on 5xx errors and network failures, not on 4xx
        - Tracks latency histogram and failure counter

        Raises:
            ProductAPIError: On exhausted retries, 4xx, or an invalid payload
        """
        attempt = 0
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            while True:
                try:
                    with product_fetch_latency_histogram.time():
                        response = await client.get(f"{self.base_url}/products/{product_id}")
                        response.raise_for_status()
                    data = response.json()
                    break

                except httpx.HTTPStatusError as e:
                    product_fetch_failures_counter.inc()
                    if e.response.status_code < 500:
                        raise ProductAPIError(f"Product API error: {e.response.status_code}") from e
                    attempt += 1
                    if attempt >= self.max_retries:
                        raise ProductAPIError(f"Product API error: {e.response.status_code}") from e

                except httpx.TimeoutException as e:
                    product_fetch_failures_counter.inc()
                    attempt += 1
                    if attempt >= self.max_retries:
                        raise ProductAPIError(f"Product API timeout after {self.timeout}s") from e

                except httpx.RequestError as e:
                    product_fetch_failures_counter.inc()
                    attempt += 1
                    if attempt >= self.max_retries:
                        raise ProductAPIError(f"Product API unreachable: {e}") from e

                except ValueError as e:
                    product_fetch_failures_counter.inc()
                    raise ProductAPIError(f"Invalid product data: {e}") from e

                backoff = self.backoff_base * (2 ** (attempt - 1))
                logger.warning(
                    "Retrying product fetch",
                    extra={"product_id": product_id, "attempt": attempt, "backoff_seconds": backoff},
                )
                await asyncio.sleep(backoff)

        if not isinstance(data, dict):
            raise ProductAPIError("Invalid product data: expected a JSON object")

        try:
            return parse_product(data)
        except (ValueError, TypeError) as e:
            raise ProductAPIError(f"Invalid product data: {e}") from e
