import uuid

from django.db import models


class Category(models.Model):
    id = models.SlugField(primary_key=True, max_length=64)
    name = models.CharField(max_length=100, unique=True)

    class Meta:
        db_table = "categories"

    def __str__(self):
        return self.name


class Product(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    image_url = models.TextField(blank=True, null=True)
    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        related_name="products",
        blank=True,
        null=True,
    )
    description = models.TextField(blank=True, null=True)
    featured = models.BooleanField(default=False)
    popular = models.BooleanField(default=False)
    in_stock = models.BooleanField(default=True)
    is_frozen_food = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "products"
        indexes = [
            models.Index(fields=["in_stock"], name="product_in_stock_idx"),
        ]

    def __str__(self):
        return self.name
