from apps.common.repository import GenericRepository
from .models import Product


class ProductRepository(GenericRepository[Product]):
    def __init__(self):
        super().__init__(Product)

    def list_in_stock(self, **filters):
        """Storefront listing: only products currently in stock."""
        return self.model.objects.filter(in_stock=True, **filters).select_related("category")

    def get_in_stock(self, product_id):
        return self.list_in_stock(id=product_id).first()
