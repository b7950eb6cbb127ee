"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Every
action runs its rule set through ``handle_input_errors`` first; only a
request without violations reaches the handler body.  Domain exceptions
are caught and translated into HTTP status codes; storage failures
propagate to ``modules.core.exceptions.api_exception_handler``.

Response envelopes:
- success: ``{"data": ...}``
- validation failure: ``{"errors": [...]}`` (400)
- missing product: ``{"error": "Producto no encontrado"}`` (404)
"""

from __future__ import annotations

from typing import Any

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import (
    OpenApiParameter,
    extend_schema,
    extend_schema_view,
    inline_serializer,
)
from pydantic import ValidationError as PydanticValidationError
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.validation import BODY, handle_input_errors
from modules.products import rules
from modules.products.dtos import CreateProductDTO, ReplaceProductDTO
from modules.products.exceptions import NOT_FOUND_MESSAGE, ProductNotFound
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService

DELETED_MESSAGE = "Producto eliminado"

_ID_PARAMETER = OpenApiParameter(
    "id",
    OpenApiTypes.INT,
    OpenApiParameter.PATH,
    description="The ID of the product",
)

_CREATE_BODY = inline_serializer(
    "ProductCreateBody",
    fields={
        "name": serializers.CharField(),
        "price": serializers.FloatField(),
    },
)

_REPLACE_BODY = inline_serializer(
    "ProductReplaceBody",
    fields={
        "name": serializers.CharField(),
        "price": serializers.FloatField(),
        "availability": serializers.BooleanField(),
    },
)


def _docs(**kwargs):
    return extend_schema(tags=["Products"], **kwargs)


@extend_schema_view(
    list=_docs(summary="Get a list of products"),
    retrieve=_docs(summary="Get a product by ID", parameters=[_ID_PARAMETER]),
    create=_docs(summary="Create a new product", request=_CREATE_BODY),
    update=_docs(
        summary="Replace a product with user input",
        parameters=[_ID_PARAMETER],
        request=_REPLACE_BODY,
    ),
    partial_update=_docs(
        summary="Toggle product availability",
        parameters=[_ID_PARAMETER],
        request=None,
    ),
    destroy=_docs(summary="Delete a product by ID", parameters=[_ID_PARAMETER]),
)
class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    pagination_class = None
    lookup_field = "id"
    # Any segment reaches the view; the ``id`` rule decides whether it is valid.
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # Collection
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return Response({"data": ProductSerializer(products, many=True).data})

    @handle_input_errors(rules.CREATE_RULES)
    def create(self, request: Request) -> Response:
        """POST /api/products"""
        data = request.data
        try:
            dto = CreateProductDTO(name=data.get("name"), price=data.get("price"))
        except PydanticValidationError as exc:
            return _dto_error_response(exc)

        product = self._service.create_product(dto)
        return Response(
            {"data": ProductSerializer(product).data},
            status=status.HTTP_201_CREATED,
        )

    # ------------------------------------------------------------------
    # Single resource
    # ------------------------------------------------------------------

    @handle_input_errors(rules.BY_ID_RULES)
    def retrieve(self, request: Request, id: str) -> Response:
        """GET /api/products/{id}"""
        try:
            product = self._service.get_product(int(id))
        except ProductNotFound:
            return _not_found_response()
        return Response({"data": ProductSerializer(product).data})

    @handle_input_errors(rules.REPLACE_RULES)
    def update(self, request: Request, id: str) -> Response:
        """PUT /api/products/{id}"""
        data = request.data
        try:
            dto = ReplaceProductDTO(
                name=data.get("name"),
                price=data.get("price"),
                availability=data.get("availability"),
            )
        except PydanticValidationError as exc:
            return _dto_error_response(exc)

        try:
            product = self._service.replace_product(int(id), dto)
        except ProductNotFound:
            return _not_found_response()
        return Response({"data": ProductSerializer(product).data})

    @handle_input_errors(rules.BY_ID_RULES)
    def partial_update(self, request: Request, id: str) -> Response:
        """PATCH /api/products/{id}

        Takes no body: flips ``availability``.
        """
        try:
            product = self._service.toggle_availability(int(id))
        except ProductNotFound:
            return _not_found_response()
        return Response({"data": ProductSerializer(product).data})

    @handle_input_errors(rules.BY_ID_RULES)
    def destroy(self, request: Request, id: str) -> Response:
        """DELETE /api/products/{id}"""
        try:
            self._service.delete_product(int(id))
        except ProductNotFound:
            return _not_found_response()
        return Response({"data": DELETED_MESSAGE})


def _not_found_response() -> Response:
    return Response({"error": NOT_FOUND_MESSAGE}, status=status.HTTP_404_NOT_FOUND)


def _dto_error_response(exc: PydanticValidationError) -> Response:
    errors: list[dict[str, Any]] = [
        {
            "type": "field",
            "msg": error["msg"],
            "path": ".".join(str(part) for part in error["loc"]),
            "location": BODY,
        }
        for error in exc.errors()
    ]
    return Response({"errors": errors}, status=status.HTTP_400_BAD_REQUEST)
