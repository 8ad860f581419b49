"""
Cart Store: the shopper's line items for the current session.

One line per product. Adding a product that is already in the cart grows its
meters; a line whose meters fall to zero or below is dropped. Name, price and
image are a snapshot taken when the line was created and are never refreshed
from the catalog. Requested meters are not checked against stock.
"""
from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple

from .config import CURRENCY_SYMBOL


@dataclass(frozen=True)
class CartLine:
    product_id: int
    name: str
    price_per_meter: float
    meters: float
    image_url: str = ""

    @property
    def line_total(self) -> float:
        return self.price_per_meter * self.meters


class CartStore:
    def __init__(self):
        # dict keeps insertion order, so lines read back in the order first added
        self._lines: Dict[int, CartLine] = {}

    @property
    def lines(self) -> Tuple[CartLine, ...]:
        return tuple(self._lines.values())

    def get(self, product_id: int) -> Optional[CartLine]:
        return self._lines.get(product_id)

    def __len__(self):
        return len(self._lines)

    def __contains__(self, product_id):
        return product_id in self._lines

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def add_to_cart(self, item: CartLine) -> None:
        existing = self._lines.get(item.product_id)
        if existing is None:
            if item.meters > 0:
                self._lines[item.product_id] = item
            return

        self._set_meters(existing, existing.meters + item.meters)

    def remove_from_cart(self, product_id: int) -> None:
        self._lines.pop(product_id, None)

    def update_quantity(self, product_id: int, meters: float) -> None:
        existing = self._lines.get(product_id)
        if existing is None:
            return
        self._set_meters(existing, meters)

    def get_total_cost(self) -> float:
        return sum(line.line_total for line in self._lines.values())

    @property
    def total_meters(self) -> float:
        return sum(line.meters for line in self._lines.values())

    def clear(self) -> None:
        self._lines.clear()

    def _set_meters(self, line: CartLine, meters: float) -> None:
        if meters <= 0:
            self.remove_from_cart(line.product_id)
        else:
            self._lines[line.product_id] = replace(line, meters=meters)


def format_price(amount: float) -> str:
    return f"{CURRENCY_SYMBOL}{amount:,.2f}"


def build_cart_summary(cart: CartStore) -> dict:
    items = []
    for line in cart.lines:
        items.append({
            "productId": line.product_id,
            "name": line.name,
            "meters": line.meters,
            "imageUrl": line.image_url,
            "pricePerMeter": line.price_per_meter,
            "pricePerMeterFormatted": format_price(line.price_per_meter),
            "lineTotal": line.line_total,
            "lineTotalFormatted": format_price(line.line_total),
        })

    total = cart.get_total_cost()
    return {
        "items": items,
        "lineCount": len(cart),
        "totalMeters": cart.total_meters,
        "totalCost": total,
        "totalCostFormatted": format_price(total),
    }
