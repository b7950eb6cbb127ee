"""Product service layer (Use Cases).

One method per resource handler.  Each performs a single logical
persistence operation through the injected ``IProductRepository`` and
raises ``ProductNotFound`` when the addressed row does not exist, before
any mutation happens.  Input has already passed the request rules, so
the service does not re-validate it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.products.exceptions import ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, ReplaceProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        return self._repo.list()

    def get_product(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        return self._get_or_raise(id)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: CreateProductDTO) -> Product:
        """Insert a new product; availability always starts as ``True``."""
        product = Product(name=dto.name, price=dto.price, availability=True)
        product = self._repo.save(product)
        logger.info("product.created", product_id=product.pk)
        return product

    @transaction.atomic
    def replace_product(self, id: int, dto: ReplaceProductDTO) -> Product:
        """Overwrite every writable field of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)

        product.name = dto.name
        product.price = dto.price
        product.availability = dto.availability

        product = self._repo.save(product)
        logger.info("product.updated", product_id=id)
        return product

    @transaction.atomic
    def toggle_availability(self, id: int) -> Product:
        """Flip ``availability``.  Two consecutive calls restore the original value.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        availability = product.toggle_availability()
        product = self._repo.save(product)
        logger.info(
            "product.availability_toggled",
            product_id=id,
            availability=availability,
        )
        return product

    @transaction.atomic
    def delete_product(self, id: int) -> None:
        """Hard-delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        self._get_or_raise(id)
        self._repo.delete(id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, id: int) -> Product:
        product = self._repo.get_by_id(id)
        if product is None:
            logger.info("product.not_found", product_id=id)
            raise ProductNotFound(f"Product {id} not found.")
        return product
