"""
Products Router

Read-only catalog endpoints with display currency price lines.
"""
from typing import List

from fastapi import APIRouter, HTTPException

from solaris.cart import CatalogItem, get_catalog_item, list_catalog
from solaris.errors import ERROR_PRODUCT_NOT_FOUND
from solaris.services.currency import convert_for_display, format_price_line
from solaris.services.money import to_float
from .models import ProductResponse

router = APIRouter(prefix="/api/products", tags=["products"])


def _product_response(product: CatalogItem) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "price": to_float(product.price),
        "tagline": product.tagline,
        "description": product.description,
        "image_urls": list(product.image_urls),
        "price_line": format_price_line(product.price),
        "display_prices": {
            currency: to_float(amount)
            for currency, amount in convert_for_display(product.price).items()
        },
    }


@router.get("", response_model=List[ProductResponse])
async def get_products():
    """List the catalog in display order."""
    return [_product_response(product) for product in list_catalog()]


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str):
    """Get a single product."""
    product = get_catalog_item(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return _product_response(product)
