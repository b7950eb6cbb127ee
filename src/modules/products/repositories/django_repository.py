"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
(or ``False``) instead of raising HTTP-level exceptions; the Service Layer
decides how to translate a missing entity into an API response.
Storage failures (``DatabaseError``) are not caught here.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or out-of-range IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, TypeError, OverflowError):
            return None

    def list(self) -> List[Product]:
        return list(Product.objects.order_by("id"))

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (insert or update) a product."""
        is_new = entity.pk is None
        entity.save()
        logger.info(
            "product.saved",
            product_id=entity.pk,
            created=is_new,
        )
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Hard-delete a product by ID.

        Returns ``True`` if a row was removed, ``False`` if no product
        exists with the given ID.
        """
        product = self.get_by_id(id)
        if not product:
            return False
        product.delete()
        logger.info("product.deleted", product_id=id)
        return True
