"""Product repository interface.

The Persistence Store contract the Product service depends on:
``list / get_by_id / save / delete`` over Product rows.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def list(self) -> List["Product"]:
        """List every product ordered by ascending ``id``."""
