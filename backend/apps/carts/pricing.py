from dataclasses import dataclass
from decimal import Decimal

from .dtos import ZERO, Cart


@dataclass(frozen=True)
class DeliveryRules:
    free_delivery_threshold: Decimal = Decimal("500")
    frozen_food_delivery_fee: Decimal = Decimal("70")
    weekend_menu_free_delivery: bool = True
    base_delivery_fee: Decimal = ZERO


@dataclass(frozen=True)
class PriceQuote:
    subtotal: Decimal
    delivery_fee: Decimal
    total: Decimal


def delivery_fee(cart: Cart, rules: DeliveryRules, weekend_menu: bool = False) -> Decimal:
    """First matching rule wins."""
    if cart.is_empty:
        return ZERO
    if weekend_menu and rules.weekend_menu_free_delivery:
        return ZERO
    if cart.subtotal >= rules.free_delivery_threshold:
        return ZERO
    if cart.has_frozen_food:
        return rules.frozen_food_delivery_fee
    return rules.base_delivery_fee


def quote(cart: Cart, rules: DeliveryRules, weekend_menu: bool = False) -> PriceQuote:
    subtotal = cart.subtotal
    fee = delivery_fee(cart, rules, weekend_menu=weekend_menu)
    return PriceQuote(subtotal=subtotal, delivery_fee=fee, total=subtotal + fee)
