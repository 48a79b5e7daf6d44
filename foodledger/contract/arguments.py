"""
Food Ledger Contract — Argument Coercion
===========================================
Invokers send positional arguments, usually as strings. Each parameter
declares a coercer that turns the wire value into what the contract
expects, or raises ValueError.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable

from foodledger.assets.product import Actor, Location


def text(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {type(value).__name__}.")
    return value


def number(value: Any) -> int | float:
    """
    Numeric text such as "30" or "12.5" becomes 30 / 12.5.
    Numbers pass through. Booleans and anything else are rejected.
    """
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError as exc:
            raise ValueError(f"{value!r} is not a number.") from exc
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{value!r} is not a number.")
    return value


def location(value: Any) -> Location:
    return Location.parse(value)


def actor(value: Any) -> Actor:
    return Actor.parse(value)


@dataclass(frozen=True)
class Parameter:
    name: str
    coerce: Callable[[Any], Any] = text

    def __post_init__(self):
        if not self.name or not isinstance(self.name, str):
            raise ValueError("name must be a non-empty string.")
        if not callable(self.coerce):
            raise ValueError("coerce must be callable.")


def coerce_arguments(
    parameters: tuple[Parameter, ...],
    args: tuple[Any, ...] | list[Any],
) -> list[Any]:
    """
    Coerce positional args against parameters.

    Raises:
        ValueError: wrong arity, or a value its coercer rejects.
    """
    if len(args) != len(parameters):
        raise ValueError(
            f"expected {len(parameters)} argument(s), got {len(args)}."
        )

    coerced = []
    for parameter, value in zip(parameters, args):
        try:
            coerced.append(parameter.coerce(value))
        except ValueError as exc:
            raise ValueError(f"{parameter.name}: {exc}") from exc
    return coerced
