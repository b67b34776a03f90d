from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.dtos import CreateProductDTO
from modules.products.exceptions import ProductAlreadyExists
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

SEED_PRODUCTS: list[tuple[str, str, str]] = [
    ("Blue Bike", "249.90", "Lightweight city bike."),
    ("Red Helmet", "59.00", "Adjustable helmet with rear light."),
    ("Cozy Loft #3", "120.00", "Weekend stay in a quiet loft."),
    ("Trail Running Shoes", "139.99", "Grippy sole for wet trails."),
    ("Espresso Grinder", "89.50", "Conical burr grinder, 40 settings."),
    ("Travel Mug (350 ml)", "19.99", "Leak-proof steel mug."),
    ("USB-C Charger 65W", "45.00", "Two-port GaN charger."),
    ("Gift Card", "0.00", "Redeemable at checkout."),
]


class Command(BaseCommand):
    help = "Seed the catalog with demo products."

    def add_arguments(self, parser) -> None:
        parser.add_argument(
            "--inactive",
            action="store_true",
            help="Create the products with is_active=False.",
        )

    def handle(self, *args, **options):
        service = ProductService(repository=ProductDjangoRepository())
        created = skipped = 0

        self.stdout.write("Seeding products...")
        for name, price, description in SEED_PRODUCTS:
            dto = CreateProductDTO(
                name=name,
                price=Decimal(price),
                description=description,
                is_active=not options["inactive"],
            )
            try:
                service.create_product(dto)
            except ProductAlreadyExists:
                skipped += 1
                continue
            created += 1

        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: created={created}, skipped={skipped}")
        )
