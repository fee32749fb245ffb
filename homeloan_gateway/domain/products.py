"""Display pricing for catalogue products"""

import math

from homeloan_gateway.domain.models import Product, ProductDisplay


def stock_level(stock: int) -> str:
    """Bucket stock counts for the availability badge"""
    if stock > 50:
        return "high"
    elif stock > 20:
        return "medium"
    else:
        return "low"


def build_product_display(product: Product) -> ProductDisplay:
    """
    Derive the struck-through original price, savings, and badges.

    original_price = price / (1 - discount%), e.g. 9.99 at 7.17% off -> 10.76
    A discount of 100% or more has no finite original price; price is used.
    """
    discount = product.discount_percentage
    if 0 < discount < 100:
        original_price = product.price / (1 - discount / 100)
    else:
        original_price = product.price

    rating = product.rating if math.isfinite(product.rating) else 0.0

    return ProductDisplay(
        product=product,
        original_price=round(original_price, 2),
        savings=round(original_price - product.price, 2),
        has_discount=discount > 0,
        stock_level=stock_level(product.stock),
        rating_stars=max(0, min(5, math.floor(rating))),
    )
