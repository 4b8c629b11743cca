# products/management/commands/seed_products.py

from django.core.management.base import BaseCommand

from products.models import Product


class Command(BaseCommand):
    help = "Seed a handful of demo catalog products (idempotent by slug)"

    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding products..."))

        # slug, name, category, price_cents, quantity_available, one-off
        products_data = [
            ("blue-crab-shell-ornament", "Blue Crab Shell Ornament", "Ornaments", 2400, None, True),
            ("oyster-ring-dish", "Oyster Ring Dish", "Ring Dishes", 1800, 6, False),
            ("painted-scallop-set", "Painted Scallop Set", "Decor", 3200, 3, False),
            ("bay-sunset-shell-frame", "Bay Sunset Shell Frame", "Decor", 4500, None, True),
        ]

        created_count = 0
        for slug, name, category, price, qty, one_off in products_data:
            _, created = Product.objects.get_or_create(
                slug=slug,
                defaults={
                    "name": name,
                    "category": category,
                    "price_cents": price,
                    "quantity_available": qty,
                    "is_one_off": one_off,
                    "is_active": True,
                },
            )
            created_count += int(created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Products seeded: {created_count} created, "
                f"{len(products_data) - created_count} already present."
            )
        )
