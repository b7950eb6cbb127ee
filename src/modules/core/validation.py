"""Declarative request validation and the gate step.

A validation rule inspects a single field of the incoming request, taken
either from the URL path (``params``) or from the decoded JSON body
(``body``), and yields at most one ``Violation``.  Rules never mutate the
request and never touch storage.

Rule sets are declared per endpoint with a small chain DSL::

    CREATE_RULES = rule_set(
        body("name").not_blank("Name is empty"),
        body("price")
        .is_numeric("Invalid value")
        .custom(is_positive, "Invalid value"),
    )

Every rule of a set is evaluated, in declaration order, even when an
earlier rule on the same field already failed: violations accumulate.

``handle_input_errors`` is the gate between validation and the handler:
when the set produced violations the request is answered with HTTP 400
and the handler is never invoked.
"""

from __future__ import annotations

import functools
import math
import re
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
)

import structlog
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

logger = structlog.get_logger(__name__)

PARAMS = "params"
BODY = "body"


class _Missing:
    """Sentinel for a field absent from the request."""

    def __repr__(self) -> str:
        return "<missing>"


MISSING: Any = _Missing()

_INT_RE = re.compile(r"^[-+]?(?:0|[1-9][0-9]*)$")
_NUMERIC_RE = re.compile(r"^[-+]?(?:[0-9]*\.)?[0-9]+$")
_BOOLEAN_STRINGS = frozenset({"true", "false", "0", "1"})


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def is_int(value: Any) -> bool:
    """Integer literal, as a path segment or a JSON number."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and _INT_RE.match(value) is not None


def _finite_float(value: Any) -> Optional[float]:
    """The float a price value is stored as, or ``None`` when there is none.

    Values that overflow a double (``10 ** 400``, ``"1" * 400``) have no
    finite float and are treated like any other non-number.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        if _NUMERIC_RE.match(value) is None:
            return None
    elif not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def is_numeric(value: Any) -> bool:
    """A finite JSON number, or a plain decimal string such as ``"12.50"``."""
    return _finite_float(value) is not None


def is_not_empty(value: Any) -> bool:
    return not (value is MISSING or value is None or value == "")


def is_not_blank(value: Any) -> bool:
    """Like ``is_not_empty`` but whitespace-only strings count as empty."""
    if isinstance(value, str):
        return bool(value.strip())
    return is_not_empty(value)


def is_positive(value: Any) -> bool:
    """Greater than zero as a stored float; decimals too small for a double
    round to 0 and fail.

    Independent of ``is_numeric``: JSON ``true`` compares as 1.
    """
    if isinstance(value, bool):
        return value
    number = _finite_float(value)
    return number is not None and number > 0


def is_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return True
    return isinstance(value, str) and value in _BOOLEAN_STRINGS


# ---------------------------------------------------------------------------
# Violations and rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Violation:
    """A single failed rule: which field, where it came from, and why."""

    field: str
    message: str
    location: str = BODY
    value: Any = MISSING

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"type": "field"}
        if self.value is not MISSING:
            payload["value"] = self.value
        payload["msg"] = self.message
        payload["path"] = self.field
        payload["location"] = self.location
        return payload


@dataclass(frozen=True)
class Rule:
    """Pure check of one request field.

    Calling a rule with the path parameters and the decoded body returns
    a list holding zero or one ``Violation``.
    """

    field: str
    location: str
    check: Callable[[Any], bool]
    message: str

    def extract(self, params: Mapping[str, Any], body: Any) -> Any:
        source = params if self.location == PARAMS else body
        if isinstance(source, Mapping) and self.field in source:
            return source[self.field]
        return MISSING

    def __call__(self, params: Mapping[str, Any], body: Any) -> List[Violation]:
        value = self.extract(params, body)
        if self.check(value):
            return []
        return [
            Violation(
                field=self.field,
                message=self.message,
                location=self.location,
                value=value,
            )
        ]


class FieldChain:
    """Builder that accumulates the rules declared for one field."""

    def __init__(self, field: str, location: str) -> None:
        self.field = field
        self.location = location
        self.rules: List[Rule] = []

    def custom(self, check: Callable[[Any], bool], message: str) -> FieldChain:
        self.rules.append(Rule(self.field, self.location, check, message))
        return self

    def is_int(self, message: str) -> FieldChain:
        return self.custom(is_int, message)

    def is_numeric(self, message: str) -> FieldChain:
        return self.custom(is_numeric, message)

    def is_boolean(self, message: str) -> FieldChain:
        return self.custom(is_boolean, message)

    def not_empty(self, message: str) -> FieldChain:
        return self.custom(is_not_empty, message)

    def not_blank(self, message: str) -> FieldChain:
        return self.custom(is_not_blank, message)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)


def param(name: str) -> FieldChain:
    return FieldChain(name, PARAMS)


def body(name: str) -> FieldChain:
    return FieldChain(name, BODY)


def rule_set(*chains: Iterable[Rule]) -> Tuple[Rule, ...]:
    """Flatten field chains into one ordered, immutable rule set."""
    return tuple(rule for chain in chains for rule in chain)


def run_rules(
    rules: Sequence[Rule], params: Mapping[str, Any], body: Any
) -> List[Violation]:
    """Evaluate every rule and concatenate the violations in order."""
    violations: List[Violation] = []
    for rule in rules:
        violations.extend(rule(params, body))
    return violations


# ---------------------------------------------------------------------------
# Gate step
# ---------------------------------------------------------------------------


def validation_error_response(violations: Sequence[Violation]) -> Response:
    return Response(
        {"errors": [violation.as_dict() for violation in violations]},
        status=status.HTTP_400_BAD_REQUEST,
    )


def handle_input_errors(rules: Sequence[Rule]) -> Callable:
    """Guard a view method with ``rules``.

    Path parameters are the URL keyword arguments the router passes to the
    view; the body is ``request.data``.  When any rule fails the wrapped
    method is not called.
    """

    def decorator(view_method: Callable) -> Callable:
        @functools.wraps(view_method)
        def wrapper(view, request: Request, *args: Any, **kwargs: Any) -> Response:
            violations = run_rules(rules, params=kwargs, body=request.data)
            if violations:
                logger.warning(
                    "request.validation_failed",
                    method=request.method,
                    path=request.path,
                    violations=len(violations),
                )
                return validation_error_response(violations)
            return view_method(view, request, *args, **kwargs)

        return wrapper

    return decorator
