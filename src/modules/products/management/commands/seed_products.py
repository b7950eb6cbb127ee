from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.products.dtos import CreateProductDTO
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

SEED_PRODUCTS = [
    ("Monitor Curvo 27'", 250),
    ("Monitor Curvo 47'", 100),
    ("Teclado Mecánico", 89.9),
    ("Mouse Inalámbrico", 35.5),
    ("Audífonos Gamer", 120),
]


class Command(BaseCommand):
    help = "Seed the products table with sample data (use --clear to wipe it first)."

    def add_arguments(self, parser) -> None:
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete every product before seeding.",
        )
        parser.add_argument(
            "--only-clear",
            action="store_true",
            help="Delete every product and exit without seeding.",
        )

    def handle(self, *args, **options):
        if options["clear"] or options["only_clear"]:
            deleted, _ = Product.objects.all().delete()
            self.stdout.write(f"Deleted {deleted} products.")
            if options["only_clear"]:
                return

        service = ProductService(repository=ProductDjangoRepository())
        created = 0
        for name, price in SEED_PRODUCTS:
            service.create_product(CreateProductDTO(name=name, price=price))
            created += 1

        self.stdout.write(self.style.SUCCESS(f"Seed completed: products={created}"))
