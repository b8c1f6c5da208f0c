"""Fixed Solaris product catalog."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from solaris.services.money import subtract

SUNGLASSES_ID = "sg1"
LENSES_ID = "ln1"
BUNDLE_ID = "bd1"


@dataclass(frozen=True)
class CatalogItem:
    """Immutable reference data for one sellable product."""
    id: str
    name: str
    price: Decimal
    tagline: str = ""
    description: str = ""
    image_urls: Tuple[str, ...] = field(default_factory=tuple)


PRODUCTS: List[CatalogItem] = [
    CatalogItem(
        id=SUNGLASSES_ID,
        name="Solaris Signature Sunglasses",
        price=Decimal("85.00"),
        tagline="Luxury vision redefined",
        description=(
            "Premium Solaris sunglasses featuring lightweight frames with removable "
            "magnetic lenses. One size sport fit, TR90 frame, polarized UV400 lenses."
        ),
        image_urls=("/images/glasses.jpg",),
    ),
    CatalogItem(
        id=LENSES_ID,
        name="Solaris Alternate Lenses",
        price=Decimal("25.00"),
        tagline="Swap and shine",
        description=(
            "A second set of interchangeable lenses for your Solaris frames. "
            "Shatter resistant polycarbonate, multiple tints and polarizations."
        ),
        image_urls=("/images/lenses.jpg",),
    ),
    CatalogItem(
        id=BUNDLE_ID,
        name="Solaris Bundle (Sunglasses + Lenses)",
        price=Decimal("100.00"),
        tagline="Best value: save $10",
        description=(
            "One pair of signature frames and two pairs of removable magnetic "
            "lenses for day and night wear."
        ),
        image_urls=("/images/bundle.jpg",),
    ),
]

CATALOG: Dict[str, CatalogItem] = {product.id: product for product in PRODUCTS}


def get_catalog_item(product_id: str) -> Optional[CatalogItem]:
    """Look up a catalog entry; None for ids outside the catalog."""
    return CATALOG.get(product_id)


def list_catalog() -> List[CatalogItem]:
    """All products in canonical cart order (sunglasses, lenses, bundle)."""
    return list(PRODUCTS)


def bundle_savings() -> Decimal:
    """How much cheaper the bundle is than buying both components."""
    components = CATALOG[SUNGLASSES_ID].price + CATALOG[LENSES_ID].price
    return subtract(components, CATALOG[BUNDLE_ID].price)
