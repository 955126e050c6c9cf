from apps.common.repository import GenericRepository
from .models import DeliverySettings


class DeliverySettingsRepository(GenericRepository[DeliverySettings]):
    def __init__(self):
        super().__init__(DeliverySettings)

    def get_or_create_current(self) -> DeliverySettings:
        """Oldest row wins; an empty table gets the default row."""
        current = self.model.objects.order_by("id").first()
        if current is None:
            current = self.model.objects.create()
        return current
