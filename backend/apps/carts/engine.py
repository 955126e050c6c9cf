"""
Pure cart transitions.

Every function takes a cart and returns a ``CartTransition``: the next cart
plus the notices a UI should show. Nothing here performs side effects, so
dispatching notices is the caller's job (see ``session.CartSession``).

Malformed requests (quantity below one, unknown product ids) never raise;
they return the cart unchanged with no notice.
"""
from dataclasses import dataclass, field
from functools import singledispatch
from typing import Tuple

from .commands import AddToCart, ClearCart, RemoveFromCart, UpdateQuantity
from .dtos import Cart, CartLineItem, CartProduct

SUCCESS = "success"
INFO = "info"


@dataclass(frozen=True)
class Notice:
    level: str
    message: str


@dataclass(frozen=True)
class CartTransition:
    cart: Cart
    notices: Tuple[Notice, ...] = field(default_factory=tuple)


def _unchanged(cart: Cart) -> CartTransition:
    return CartTransition(cart=cart)


def add_to_cart(cart: Cart, product: CartProduct, quantity: int = 1) -> CartTransition:
    if quantity < 1:
        return _unchanged(cart)
    if cart.get(product.id) is not None:
        items = tuple(
            item.with_quantity(item.quantity + quantity) if item.product.id == product.id else item
            for item in cart.items
        )
        notice = Notice(SUCCESS, f"Added {quantity} more {product.name} to cart")
    else:
        items = cart.items + (CartLineItem(product=product, quantity=quantity),)
        notice = Notice(SUCCESS, f"Added {product.name} to cart")
    return CartTransition(cart=Cart(items=items), notices=(notice,))


def remove_from_cart(cart: Cart, product_id: str) -> CartTransition:
    """Drop the line for ``product_id``.

    Only an actual removal yields "Item removed from cart"; an id that is not in
    the cart returns it unchanged with no notice.
    """
    items = tuple(item for item in cart.items if item.product.id != product_id)
    if len(items) == len(cart.items):
        return _unchanged(cart)
    return CartTransition(cart=Cart(items=items), notices=(Notice(INFO, "Item removed from cart"),))


def update_quantity(cart: Cart, product_id: str, quantity: int) -> CartTransition:
    # zero does not remove the line; removal is its own operation
    if quantity < 1 or cart.get(product_id) is None:
        return _unchanged(cart)
    items = tuple(
        item.with_quantity(quantity) if item.product.id == product_id else item
        for item in cart.items
    )
    return CartTransition(cart=Cart(items=items))


def clear_cart(cart: Cart) -> CartTransition:
    """Empty the cart. Clearing an already empty cart is silent."""
    if cart.is_empty:
        return _unchanged(cart)
    return CartTransition(cart=Cart(), notices=(Notice(INFO, "Cart cleared"),))


def apply(cart: Cart, command) -> CartTransition:
    return _apply(command, cart)


@singledispatch
def _apply(command, cart: Cart) -> CartTransition:
    raise TypeError(f"Unsupported cart command: {type(command).__name__}")


@_apply.register
def _(command: AddToCart, cart: Cart) -> CartTransition:
    return add_to_cart(cart, command.product, command.quantity)


@_apply.register
def _(command: RemoveFromCart, cart: Cart) -> CartTransition:
    return remove_from_cart(cart, command.product_id)


@_apply.register
def _(command: UpdateQuantity, cart: Cart) -> CartTransition:
    return update_quantity(cart, command.product_id, command.quantity)


@_apply.register
def _(command: ClearCart, cart: Cart) -> CartTransition:
    return clear_cart(cart)
