from dataclasses import dataclass
from typing import Optional


@dataclass
class ProductDTO:
    id: str
    name: str
    price: str
    image_url: Optional[str]
    category_id: Optional[str]
    description: Optional[str]
    featured: bool
    popular: bool
    in_stock: bool
    is_frozen_food: bool


"""DTO dataclasses only. Mapping logic lives in mappers.py."""
