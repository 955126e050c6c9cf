from dataclasses import dataclass
from typing import Union

from .dtos import CartProduct


@dataclass(frozen=True)
class AddToCart:
    product: CartProduct
    quantity: int = 1


@dataclass(frozen=True)
class RemoveFromCart:
    product_id: str


@dataclass(frozen=True)
class UpdateQuantity:
    product_id: str
    quantity: int


@dataclass(frozen=True)
class ClearCart:
    pass


CartCommand = Union[AddToCart, RemoveFromCart, UpdateQuantity, ClearCart]
