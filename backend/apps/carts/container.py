from __future__ import annotations

from django.core.cache import cache

from apps.catalog.repositories import ProductRepository

from .mappers import CartProductMapper
from .notifications import LogNotifier, MessagesNotifier
from .repositories import DeliverySettingsRepository
from .services import CartCatalogService, DeliverySettingsService
from .session import CartSession


def build_delivery_settings_service(*, disable_cache: bool = False) -> DeliverySettingsService:
    return DeliverySettingsService(
        settings_repo=DeliverySettingsRepository(),
        cache_backend=cache,
        disable_cache=disable_cache,
    )


def build_cart_catalog_service() -> CartCatalogService:
    return CartCatalogService(products=ProductRepository(), mapper=CartProductMapper())


def build_cart_session(request=None) -> CartSession:
    """New, empty cart; notices go to django messages when a request is given."""
    notifier = MessagesNotifier(request) if request is not None else LogNotifier()
    return CartSession(notifier=notifier)
