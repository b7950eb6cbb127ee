"""Product model.

Invariants backed by database constraints:
- ``price`` is strictly greater than zero.
- ``name`` is never the empty string.
- ``availability`` defaults to ``True`` on creation.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """A sellable item in the catalog."""

    name = models.CharField(max_length=255)
    price = models.FloatField()
    availability = models.BooleanField(default=True)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
            models.CheckConstraint(
                condition=~models.Q(name=""),
                name="products_name_not_empty",
            ),
        ]

    def toggle_availability(self) -> bool:
        """Flip ``availability`` in memory and return the new value."""
        self.availability = not self.availability
        return self.availability

    def __str__(self) -> str:
        return f"#{self.pk} - {self.name}"
