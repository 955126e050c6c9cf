from typing import Iterable, List

from .dtos import ProductDTO
from .models import Product


class ProductMapper:
    @staticmethod
    def to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=str(product.id),
            name=product.name,
            price=str(product.price),
            image_url=product.image_url,
            category_id=product.category_id,
            description=product.description,
            featured=bool(product.featured),
            popular=bool(product.popular),
            in_stock=bool(product.in_stock),
            is_frozen_food=bool(product.is_frozen_food),
        )

    @staticmethod
    def many_to_dto(products: Iterable[Product]) -> List[ProductDTO]:
        return [ProductMapper.to_dto(p) for p in products]
