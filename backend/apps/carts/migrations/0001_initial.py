from decimal import Decimal

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="DeliverySettings",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                (
                    "free_delivery_threshold",
                    models.DecimalField(decimal_places=2, default=Decimal("500"), max_digits=10),
                ),
                (
                    "frozen_food_delivery_fee",
                    models.DecimalField(decimal_places=2, default=Decimal("70"), max_digits=10),
                ),
                ("weekend_menu_free_delivery", models.BooleanField(default=True)),
                (
                    "base_delivery_fee",
                    models.DecimalField(decimal_places=2, default=Decimal("0"), max_digits=10),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "delivery_settings",
                "verbose_name_plural": "delivery settings",
            },
        ),
    ]
