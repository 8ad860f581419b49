"""
Filter/Sort pipeline over the catalog held by the storefront.

Steps run in a fixed order: text search, fabric type and color, gsm and
price bounds, then sort. The input sequence is never modified.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from .config import GSM_SLIDER_MAX, PRICE_SLIDER_MAX
from .schemas import Product

ALL = "all"


class SortMode(str, Enum):
    NEWEST = "newest"
    PRICE_LOW = "priceLow"
    PRICE_HIGH = "priceHigh"

    @classmethod
    def parse(cls, value) -> "SortMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown sort mode {value!r}, expected one of: {allowed}") from None


@dataclass(frozen=True)
class FilterCriteria:
    """What the shopper typed and selected on the product list.

    `fabric_type` and `color` accept None, "" or "all" for no restriction.
    The lower bounds default to 0, which gives the single max-only slider
    per dimension.
    """
    search: str = ""
    fabric_type: Optional[str] = None
    color: Optional[str] = None
    max_gsm: float = GSM_SLIDER_MAX
    max_price: float = PRICE_SLIDER_MAX
    sort: SortMode = SortMode.NEWEST
    min_gsm: float = 0
    min_price: float = 0

    def __post_init__(self):
        object.__setattr__(self, "sort", SortMode.parse(self.sort))


def _selected(value: Optional[str]) -> Optional[str]:
    if not value or value == ALL:
        return None
    return value


def _matches_search(product: Product, query: str) -> bool:
    return query in product.name.lower() or query in product.color.lower()


def apply_filters(products: Iterable[Product], criteria: FilterCriteria) -> List[Product]:
    result = list(products)

    if criteria.search:
        q = criteria.search.lower()
        result = [p for p in result if _matches_search(p, q)]

    fabric_type = _selected(criteria.fabric_type)
    if fabric_type is not None:
        result = [p for p in result if p.fabric_type == fabric_type]

    color = _selected(criteria.color)
    if color is not None:
        result = [p for p in result if p.color == color]

    result = [
        p for p in result
        if criteria.min_gsm <= p.gsm <= criteria.max_gsm
        and criteria.min_price <= p.price_per_meter <= criteria.max_price
    ]

    # sorted() is stable, so equal prices keep their newest-first order
    if criteria.sort is SortMode.PRICE_LOW:
        result = sorted(result, key=lambda p: p.price_per_meter)
    elif criteria.sort is SortMode.PRICE_HIGH:
        result = sorted(result, key=lambda p: p.price_per_meter, reverse=True)

    return result


def distinct_values(products: Sequence[Product], attr: str) -> List[str]:
    """Facet options in first-seen order."""
    seen = {}
    for p in products:
        seen.setdefault(getattr(p, attr), None)
    return list(seen)
