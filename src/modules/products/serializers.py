"""Product DRF serializer for API output.

Input is validated by the request rules and coerced by the DTOs in
``dtos.py``; this serializer only renders persisted products.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read-only representation of the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "availability",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
