"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (views) and the
Service layer.  DTOs are immutable (``frozen=True``).

The request rules in ``rules.py`` have already accepted the raw body
by the time a DTO is built; the DTOs coerce the accepted JSON values
into their Python types (``"48"`` -> ``48.0``, ``"false"`` -> ``False``)
and re-assert the persistence invariants.

- ``CreateProductDTO``: input for product creation.
- ``ReplaceProductDTO``: input for full product replacement.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is not blank.
    - ``price`` is finite and greater than zero.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: float = Field(allow_inf_nan=False)

    @field_validator("name", mode="before")
    @classmethod
    def name_as_text(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be empty.")
        return v

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Price must be greater than zero.")
        return v


class ReplaceProductDTO(CreateProductDTO):
    """Immutable DTO for PUT requests: every writable field is required."""

    availability: bool
