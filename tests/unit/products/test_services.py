"""Unit tests for ProductService.

Covers:
- list_products / get_product: delegation and not-found.
- create_product: availability forced to True.
- replace_product: full overwrite, no save when missing.
- toggle_availability: flips once per call, not idempotent.
- delete_product: delegation, no delete when missing.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from modules.products.dtos import CreateProductDTO, ReplaceProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.save.side_effect = lambda p: p
    return repo


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


def _product(**overrides) -> Product:
    defaults = {"id": 1, "name": "Widget", "price": 19.99, "availability": True}
    defaults.update(overrides)
    return Product(**defaults)


# ===========================================================================
# Queries
# ===========================================================================


class TestListProducts:
    def test_delegates_to_repo(self, service, mock_repo):
        products = [_product(id=1), _product(id=2)]
        mock_repo.list.return_value = products

        assert service.list_products() == products
        mock_repo.list.assert_called_once_with()


class TestGetProduct:
    def test_success(self, service, mock_repo):
        existing = _product()
        mock_repo.get_by_id.return_value = existing

        assert service.get_product(1) is existing
        mock_repo.get_by_id.assert_called_once_with(1)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            service.get_product(2000)


# ===========================================================================
# create_product
# ===========================================================================


class TestCreateProduct:
    def test_success(self, service, mock_repo):
        dto = CreateProductDTO(name="Mouse - Testing", price=48)

        product = service.create_product(dto)

        assert product.name == "Mouse - Testing"
        assert product.price == 48.0
        assert product.availability is True
        mock_repo.save.assert_called_once_with(product)


# ===========================================================================
# replace_product
# ===========================================================================


class TestReplaceProduct:
    def test_overwrites_every_field(self, service, mock_repo):
        existing = _product()
        mock_repo.get_by_id.return_value = existing

        dto = ReplaceProductDTO(name="Widget v2", price=200, availability=False)
        product = service.replace_product(1, dto)

        assert product is existing
        assert (product.name, product.price, product.availability) == (
            "Widget v2",
            200.0,
            False,
        )
        assert product.id == 1
        mock_repo.save.assert_called_once_with(existing)

    def test_not_found_raises_without_saving(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        dto = ReplaceProductDTO(name="Ghost", price=200, availability=True)
        with pytest.raises(ProductNotFound):
            service.replace_product(2000, dto)

        mock_repo.save.assert_not_called()


# ===========================================================================
# toggle_availability
# ===========================================================================


class TestToggleAvailability:
    def test_flips_availability(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _product(availability=True)

        product = service.toggle_availability(1)

        assert product.availability is False
        mock_repo.save.assert_called_once()

    def test_two_toggles_restore_original_state(self, service, mock_repo):
        existing = _product(availability=True)
        mock_repo.get_by_id.return_value = existing

        assert service.toggle_availability(1).availability is False
        assert service.toggle_availability(1).availability is True

    def test_not_found_raises_without_saving(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            service.toggle_availability(400)

        mock_repo.save.assert_not_called()


# ===========================================================================
# delete_product
# ===========================================================================


class TestDeleteProduct:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _product()
        mock_repo.delete.return_value = True

        service.delete_product(1)

        mock_repo.delete.assert_called_once_with(1)

    def test_not_found_raises_without_deleting(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            service.delete_product(4000)

        mock_repo.delete.assert_not_called()
