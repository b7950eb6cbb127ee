"""Product URL configuration.

Mounted under ``api/`` by ``config.urls``:

- ``products``      -> list (GET), create (POST)
- ``products/<id>`` -> retrieve (GET), update (PUT),
  partial_update (PATCH, toggles availability), destroy (DELETE)
"""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.products.views import ProductViewSet

router = SimpleRouter(trailing_slash=False)
router.register("products", ProductViewSet, basename="product")

urlpatterns = router.urls
