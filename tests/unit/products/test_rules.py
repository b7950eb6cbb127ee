"""Unit tests for the Product endpoint rule sets.

Messages are part of the public contract, so the assertions compare
them verbatim.
"""

from __future__ import annotations

import pytest

from modules.core.validation import run_rules
from modules.products.rules import (
    BY_ID_RULES,
    CREATE_RULES,
    INVALID_AVAILABILITY,
    INVALID_ID,
    INVALID_PRICE,
    INVALID_VALUE,
    NAME_EMPTY,
    PRICE_EMPTY,
    REPLACE_RULES,
)

pytestmark = pytest.mark.unit


def _messages(rules, params=None, body=None):
    return [v.message for v in run_rules(rules, params=params or {}, body=body or {})]


class TestByIdRules:
    def test_integer_id_passes(self):
        assert _messages(BY_ID_RULES, params={"id": "1"}) == []

    def test_non_integer_id_yields_single_violation(self):
        assert _messages(BY_ID_RULES, params={"id": "not-valid-url"}) == [INVALID_ID]


class TestCreateRules:
    def test_valid_body(self):
        assert _messages(CREATE_RULES, body={"name": "Mouse - Testing", "price": 48}) == []

    def test_empty_body_yields_four_violations(self):
        assert _messages(CREATE_RULES, body={}) == [
            NAME_EMPTY,
            INVALID_VALUE,
            PRICE_EMPTY,
            INVALID_VALUE,
        ]

    def test_zero_price(self):
        assert _messages(CREATE_RULES, body={"name": "Mouse", "price": 0}) == [
            INVALID_VALUE
        ]

    def test_non_numeric_price(self):
        assert _messages(CREATE_RULES, body={"name": "Mouse", "price": "Hola"}) == [
            INVALID_VALUE,
            INVALID_VALUE,
        ]

    def test_blank_name(self):
        assert _messages(CREATE_RULES, body={"name": "   ", "price": 10}) == [NAME_EMPTY]

    def test_availability_is_not_checked(self):
        body = {"name": "Mouse", "price": 10, "availability": "nope"}
        assert _messages(CREATE_RULES, body=body) == []


class TestReplaceRules:
    def test_valid_request(self):
        body = {"name": "Mouse", "price": 200, "availability": True}
        assert _messages(REPLACE_RULES, params={"id": "1"}, body=body) == []

    def test_empty_body_yields_five_violations(self):
        assert _messages(REPLACE_RULES, params={"id": "1"}, body={}) == [
            NAME_EMPTY,
            INVALID_VALUE,
            PRICE_EMPTY,
            INVALID_PRICE,
            INVALID_AVAILABILITY,
        ]

    def test_zero_price_uses_replace_message(self):
        body = {"name": "Mouse", "price": 0, "availability": True}
        assert _messages(REPLACE_RULES, params={"id": "1"}, body=body) == [INVALID_PRICE]

    def test_create_and_replace_positive_messages_differ(self):
        assert INVALID_VALUE == "Valor no válido"
        assert INVALID_PRICE == "Precio no válido"

    def test_invalid_id_with_valid_body(self):
        body = {"name": "Mouse", "price": 100, "availability": True}
        assert _messages(REPLACE_RULES, params={"id": "abc"}, body=body) == [INVALID_ID]

    def test_non_boolean_availability(self):
        body = {"name": "Mouse", "price": 100, "availability": "maybe"}
        assert _messages(REPLACE_RULES, params={"id": "1"}, body=body) == [
            INVALID_AVAILABILITY
        ]
