from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Optional, Tuple

ZERO = Decimal("0")


@dataclass(frozen=True)
class CartProduct:
    """The only product shape a cart line ever holds."""

    id: str
    name: str
    price: Decimal
    image: Optional[str] = None
    category: Optional[str] = None
    description: str = ""
    is_frozen_food: bool = False


@dataclass(frozen=True)
class CartLineItem:
    product: CartProduct
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return self.product.price * self.quantity

    def with_quantity(self, quantity: int) -> "CartLineItem":
        return replace(self, quantity=quantity)


@dataclass(frozen=True)
class Cart:
    items: Tuple[CartLineItem, ...] = field(default_factory=tuple)

    # totals are derived on read so they can never drift from the lines

    @property
    def subtotal(self) -> Decimal:
        return sum((item.line_total for item in self.items), ZERO)

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def has_frozen_food(self) -> bool:
        return any(item.product.is_frozen_food for item in self.items)

    def get(self, product_id: str) -> Optional[CartLineItem]:
        for item in self.items:
            if item.product.id == product_id:
                return item
        return None


"""DTO dataclasses only. Mapping logic lives in mappers.py."""
