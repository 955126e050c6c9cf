from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional

from apps.common import get_logger
from .dtos import CartProduct
from .mappers import CartProductMapper
from .pricing import DeliveryRules
from .protocols import (
    CacheBackendProtocol,
    DeliverySettingsRepositoryProtocol,
    ProductRepositoryProtocol,
)

logger = get_logger(__name__).bind(component="carts", layer="service")

RULE_FIELDS = (
    "free_delivery_threshold",
    "frozen_food_delivery_fee",
    "weekend_menu_free_delivery",
    "base_delivery_fee",
)


class DeliverySettingsService:
    cache_key = "carts:delivery-rules"

    def __init__(
        self,
        settings_repo: DeliverySettingsRepositoryProtocol,
        cache_backend: CacheBackendProtocol,
        disable_cache: bool = False,
    ):
        self.settings_repo = settings_repo
        self.cache = cache_backend
        self.disable_cache = disable_cache
        self.logger = logger.bind(service="DeliverySettingsService")

    @staticmethod
    def _to_rules(row) -> DeliveryRules:
        return DeliveryRules(
            free_delivery_threshold=Decimal(row.free_delivery_threshold),
            frozen_food_delivery_fee=Decimal(row.frozen_food_delivery_fee),
            weekend_menu_free_delivery=bool(row.weekend_menu_free_delivery),
            base_delivery_fee=Decimal(row.base_delivery_fee),
        )

    def get_rules(self) -> DeliveryRules:
        if not self.disable_cache:
            cached = self.cache.get(self.cache_key)
            if cached is not None:
                self.logger.debug("Delivery rules cache hit")
                return cached
            self.logger.debug("Delivery rules cache miss")
        rules = self._to_rules(self.settings_repo.get_or_create_current())
        if not self.disable_cache:
            self.cache.set(self.cache_key, rules)
        return rules

    def update_rules(self, **changes: Any) -> DeliveryRules:
        unknown = set(changes) - set(RULE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown delivery settings: {', '.join(sorted(unknown))}")
        row = self.settings_repo.get_or_create_current()
        data: Dict[str, Any] = {k: v for k, v in changes.items() if v is not None}
        if data:
            row = self.settings_repo.update(row, **data)
            self.logger.info("Delivery settings updated", fields=sorted(data))
        self.cache.delete(self.cache_key)
        return self._to_rules(row)


class CartCatalogService:
    """Looks up storefront products in the one shape a cart accepts."""

    def __init__(
        self,
        products: ProductRepositoryProtocol,
        mapper: Optional[CartProductMapper] = None,
    ):
        self.products = products
        self.mapper = mapper or CartProductMapper()
        self.logger = logger.bind(service="CartCatalogService")

    def get_cart_product(self, product_id) -> Optional[CartProduct]:
        product = self.products.get_in_stock(product_id)
        if product is None:
            self.logger.debug("Product not available for cart", product_id=product_id)
            return None
        return self.mapper.from_model(product)
