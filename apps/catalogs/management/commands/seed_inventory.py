from django.core.management.base import BaseCommand
from django.db import DEFAULT_DB_ALIAS

from apps.catalogs.models import fold_name
from apps.catalogs.store import InventoryStore

CATEGORIES = [
    ("T-Shirt", "Short sleeve t-shirts"),
    ("Hoodie", "Outerwear with a hood"),
    ("Hat", "Accessories you wear on your head"),
]

# (nom, catégorie, prix en centimes, quantité)
ITEMS = [
    ("Shmoo Fthr T-Shirt - Charcoal/White", "T-Shirt", 10000, 5),
    ("(WSR91KWH) Newington T-Shirt - Black Heritage Wash", "T-Shirt", 10000, 6),
    ("Take Out T-Shirt - Tan", "T-Shirt", 10000, 15),
    ("x Batman Graphic Pullover Hoodie", "Hoodie", 10000, 5),
    ("High On Life Pullover Hoodie", "Hoodie", 10000, 23),
    ("LA Dodgers Swirl 59FIFTY Fitted Hat (60288093)", "Hat", 10000, 30),
    ("Lord Nermal 6 Panel Pocket Hat - Black", "Hat", 10000, 55),
]


class Command(BaseCommand):
    help = "Seed demonstration categories and items"

    def add_arguments(self, parser):
        parser.add_argument(
            "--database", default=DEFAULT_DB_ALIAS,
            help="Database alias to populate (default: %(default)s).",
        )

    def handle(self, *args, **options):
        store = InventoryStore(using=options["database"])
        by_name = {}
        with store.atomic():
            for name, description in CATEGORIES:
                obj, created = store.categories.get_or_create(
                    name_key=fold_name(name), defaults={"name": name, "description": description},
                )
                by_name[name] = obj
                self.stdout.write(self.style.SUCCESS(f"{'Created' if created else 'Exists'}: category {obj.name}"))

            for name, category, price_in_cents, quantity in ITEMS:
                obj, created = store.items.get_or_create(
                    name=name, category=by_name[category],
                    defaults={"price_in_cents": price_in_cents, "quantity": quantity},
                )
                self.stdout.write(self.style.SUCCESS(f"{'Created' if created else 'Exists'}: item {obj.name}"))
