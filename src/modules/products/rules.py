"""Request rule sets for the Product endpoints.

Messages are part of the public API and are returned verbatim.  The
"price > 0" rule deliberately reports ``Valor no válido`` on create and
``Precio no válido`` on replace.
"""

from __future__ import annotations

from modules.core.validation import body, is_positive, param, rule_set

INVALID_ID = "ID no valido"
NAME_EMPTY = "El nombre del producto esta vacio"
INVALID_VALUE = "Valor no válido"
PRICE_EMPTY = "El precio del producto esta vacio"
INVALID_PRICE = "Precio no válido"
INVALID_AVAILABILITY = "Valor para disponibilidad no valido"


def _id():
    return param("id").is_int(INVALID_ID)


def _name():
    return body("name").not_blank(NAME_EMPTY)


def _price(positive_message: str):
    return (
        body("price")
        .is_numeric(INVALID_VALUE)
        .not_empty(PRICE_EMPTY)
        .custom(is_positive, positive_message)
    )


BY_ID_RULES = rule_set(_id())

CREATE_RULES = rule_set(
    _name(),
    _price(INVALID_VALUE),
)

REPLACE_RULES = rule_set(
    _id(),
    _name(),
    _price(INVALID_PRICE),
    body("availability").is_boolean(INVALID_AVAILABILITY),
)
