from decimal import Decimal

from django.db import models


class DeliverySettings(models.Model):
    """Single-row table holding the storefront delivery fee rules."""

    free_delivery_threshold = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal("500")
    )
    frozen_food_delivery_fee = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal("70")
    )
    weekend_menu_free_delivery = models.BooleanField(default=True)
    base_delivery_fee = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal("0")
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "delivery_settings"
        verbose_name_plural = "delivery settings"

    def __str__(self):
        return (
            f"Free over {self.free_delivery_threshold}, "
            f"frozen fee {self.frozen_food_delivery_fee}"
        )
