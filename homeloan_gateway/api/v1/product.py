"""GET /v1/product/{product_id} - product card data from the external catalogue"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from homeloan_gateway.api.v1.schemas import ProductResponse
from homeloan_gateway.api.dependencies import get_product_client, get_request_id
from homeloan_gateway.config import settings
from homeloan_gateway.domain.exceptions import ProductAPIError
from homeloan_gateway.domain.products import build_product_display
from homeloan_gateway.infrastructure.clients.products import ProductClient
from homeloan_gateway.infrastructure.observability.logging import log_product_fetch

router = APIRouter()

PRODUCT_ERROR_MESSAGE = "Failed to load product"


@router.get("/product", response_model=ProductResponse)
async def get_default_product(
    request: Request,
    product_client: ProductClient = Depends(get_product_client),
):
    """Product shown on the landing page"""
    return await get_product(settings.default_product_id, request, product_client)


@router.get("/product/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    request: Request,
    product_client: ProductClient = Depends(get_product_client),
):
    """
    Fetch a product and derive its display pricing.

    Upstream failures map to 503 with a fixed message.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        product = await product_client.get_product(product_id)
    except ProductAPIError as e:
        log_product_fetch(request_id, product_id, False, (time.time() - start_time) * 1000)
        logging.error(f"Product API error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail=PRODUCT_ERROR_MESSAGE)

    log_product_fetch(request_id, product_id, True, (time.time() - start_time) * 1000)
    display = build_product_display(product)

    return ProductResponse(
        id=product.id,
        title=product.title,
        description=product.description,
        category=product.category,
        brand=product.brand,
        thumbnail=product.thumbnail,
        availability_status=product.availability_status,
        price=product.price,
        original_price=display.original_price,
        savings=display.savings,
        discount_percentage=product.discount_percentage,
        has_discount=display.has_discount,
        rating=product.rating,
        rating_stars=display.rating_stars,
        stock=product.stock,
        stock_level=display.stock_level,
    )
