from __future__ import annotations

from decimal import Decimal
from typing import Optional, Tuple

from apps.common import get_logger
from . import engine
from .commands import AddToCart, CartCommand, ClearCart, RemoveFromCart, UpdateQuantity
from .dtos import Cart, CartLineItem, CartProduct
from .notifications import LogNotifier
from .pricing import DeliveryRules, PriceQuote, quote
from .protocols import NotifierProtocol

logger = get_logger(__name__).bind(component="carts", layer="session")


class CartSession:
    """
    Owns the cart for one browsing session.

    Construct one per session and pass it to whatever needs it. State changes
    go through the pure functions in ``engine``; notices are dispatched only
    after the new cart is stored.
    """

    def __init__(self, notifier: Optional[NotifierProtocol] = None, cart: Optional[Cart] = None):
        self.notifier = notifier or LogNotifier()
        self._cart = cart or Cart()
        self.logger = logger

    @property
    def cart(self) -> Cart:
        return self._cart

    @property
    def items(self) -> Tuple[CartLineItem, ...]:
        return self._cart.items

    @property
    def subtotal(self) -> Decimal:
        return self._cart.subtotal

    @property
    def item_count(self) -> int:
        return self._cart.item_count

    def dispatch(self, command: CartCommand) -> Cart:
        transition = engine.apply(self._cart, command)
        self._cart = transition.cart
        self.logger.debug(
            "Cart command applied",
            command=type(command).__name__,
            item_count=self._cart.item_count,
            subtotal=str(self._cart.subtotal),
        )
        for notice in transition.notices:
            self.notifier.notify(notice)
        return self._cart

    def add_to_cart(self, product: CartProduct, quantity: int = 1) -> Cart:
        return self.dispatch(AddToCart(product=product, quantity=quantity))

    def remove_from_cart(self, product_id: str) -> Cart:
        return self.dispatch(RemoveFromCart(product_id=product_id))

    def update_quantity(self, product_id: str, quantity: int) -> Cart:
        return self.dispatch(UpdateQuantity(product_id=product_id, quantity=quantity))

    def clear_cart(self) -> Cart:
        return self.dispatch(ClearCart())

    def quote(self, rules: DeliveryRules, weekend_menu: bool = False) -> PriceQuote:
        return quote(self._cart, rules, weekend_menu=weekend_menu)
