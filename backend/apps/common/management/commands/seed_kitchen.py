from decimal import Decimal

from django.contrib.auth.hashers import make_password
from django.core.management.base import BaseCommand
from django.db import transaction

from apps.auth.models import UserSession
from apps.carts.models import DeliverySettings
from apps.catalog.models import Category, Product
from apps.users.models import Role, User

CATEGORIES = [
    ("frozen-food", "Frozen Food"),
    ("breakfast", "Breakfast"),
    ("children-tiffin", "Children's Tiffin"),
    ("lunch", "Lunch"),
    ("dinner", "Dinner"),
    ("desserts", "Desserts"),
]

# name, price, category, description, featured, popular, frozen
PRODUCTS = [
    ("Aloo Paratha", "90.00", "breakfast", "Two stuffed flatbreads with pickle and curd", True, True, False),
    ("Masala Omelette Roll", "70.00", "breakfast", "Spiced omelette wrapped in a soft roti", False, False, False),
    ("Mini Idli Box", "80.00", "children-tiffin", "Bite-sized idlis with mild sambar", False, True, False),
    ("Veg Thali", "220.00", "lunch", "Dal, two sabzis, rice, rotis and salad", True, True, False),
    ("Chicken Biryani", "260.00", "lunch", "Dum-cooked basmati with bone-in chicken", True, True, False),
    ("Paneer Butter Masala", "240.00", "dinner", "Cottage cheese in tomato-cashew gravy", False, True, False),
    ("Dal Makhani", "180.00", "dinner", "Slow-cooked black lentils finished with butter", False, False, False),
    ("Gulab Jamun (4 pcs)", "60.00", "desserts", "Milk dumplings soaked in rose syrup", False, True, False),
    ("Frozen Veg Samosa (12 pcs)", "150.00", "frozen-food", "Fry from frozen in eight minutes", False, False, True),
    ("Frozen Chicken Seekh Kebab (8 pcs)", "320.00", "frozen-food", "Chargrilled then blast-frozen", True, False, True),
    ("Frozen Malabar Parotta (5 pcs)", "120.00", "frozen-food", "Layered flatbread, heat on a tawa", False, False, True),
]

STAFF = [
    ("admin1", "admin1@kitchen.local", Role.ADMIN),
    ("chef1", "chef1@kitchen.local", Role.KITCHEN),
    ("rider1", "rider1@kitchen.local", Role.RIDER),
]


class Command(BaseCommand):
    help = "Seed categories, menu items, delivery settings and one account per staff role."

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush", action="store_true", help="Delete existing data before seeding"
        )
        parser.add_argument(
            "--password", default="correct-pw", help="Password for every seeded account"
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["flush"]:
            self.stdout.write("Flushing existing data...")
            UserSession.objects.all().delete()
            Product.objects.all().delete()
            Category.objects.all().delete()
            DeliverySettings.objects.all().delete()
            User.objects.filter(username__in=[u for u, _, _ in STAFF]).delete()

        self.stdout.write("Seeding categories...")
        for slug, name in CATEGORIES:
            Category.objects.update_or_create(id=slug, defaults={"name": name})

        self.stdout.write("Seeding products...")
        for name, price, category, desc, featured, popular, frozen in PRODUCTS:
            Product.objects.update_or_create(
                name=name,
                defaults=dict(
                    price=Decimal(price),
                    category_id=category,
                    description=desc,
                    featured=featured,
                    popular=popular,
                    in_stock=True,
                    is_frozen_food=frozen,
                ),
            )

        self.stdout.write("Ensuring delivery settings...")
        if not DeliverySettings.objects.exists():
            DeliverySettings.objects.create()

        self.stdout.write("Seeding staff accounts...")
        password_hash = make_password(options["password"])
        for username, email, role in STAFF:
            user, created = User.objects.update_or_create(
                username=username,
                defaults={
                    "email": email,
                    "role": role,
                    "is_active": True,
                    "password": password_hash,
                },
            )
            # a reseed resets passwords, so old sessions must go
            if not created:
                UserSession.objects.filter(user=user).delete()

        self.stdout.write(self.style.SUCCESS("Kitchen seed completed."))
