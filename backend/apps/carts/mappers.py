from decimal import Decimal
from typing import Iterable, List, Optional

from apps.catalog.dtos import ProductDTO
from apps.catalog.mappers import ProductMapper
from apps.catalog.models import Product
from .dtos import CartProduct


class CartProductMapper:
    """Catalogue product -> cart product. No other conversion path exists."""

    def __init__(self, product_mapper: Optional[ProductMapper] = None) -> None:
        self.product_mapper = product_mapper or ProductMapper()

    @staticmethod
    def from_catalog(dto: ProductDTO) -> CartProduct:
        return CartProduct(
            id=str(dto.id),
            name=dto.name,
            price=Decimal(dto.price),
            image=dto.image_url,
            category=dto.category_id,
            description=dto.description or "",
            is_frozen_food=bool(dto.is_frozen_food),
        )

    def from_model(self, product: Product) -> CartProduct:
        return self.from_catalog(self.product_mapper.to_dto(product))

    def many_from_models(self, products: Iterable[Product]) -> List[CartProduct]:
        return [self.from_model(p) for p in products]
