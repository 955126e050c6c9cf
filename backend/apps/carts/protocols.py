from __future__ import annotations

from typing import Any, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.carts.engine import Notice
    from apps.carts.models import DeliverySettings
    from apps.catalog.models import Product


class NotifierProtocol(Protocol):
    def notify(self, notice: "Notice") -> None:
        ...


class DeliverySettingsRepositoryProtocol(Protocol):
    def get_or_create_current(self) -> "DeliverySettings":
        ...

    def update(self, obj: "DeliverySettings", **data) -> "DeliverySettings":
        ...


class ProductRepositoryProtocol(Protocol):
    def get_in_stock(self, product_id) -> Optional["Product"]:
        ...


class CacheBackendProtocol(Protocol):
    def get(self, key: str) -> Any:
        ...

    def set(self, key: str, value: Any, timeout: Optional[int] = None) -> None:
        ...

    def delete(self, key: str) -> None:
        ...
