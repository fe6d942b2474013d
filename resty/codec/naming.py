"""Recursive JSON key translation between snake_case and camelCase.

Pure transformation: values and structure are preserved, the input is never
mutated, non-string keys are left alone. Single-key conversion is pydantic's
(`to_camel` / `to_snake`), which keeps digit boundaries symmetric:
"address_line_1" <-> "addressLine1".
"""
from __future__ import annotations

from typing import Any, Callable

from pydantic.alias_generators import to_camel, to_snake


def convert_keys(obj: Any, convert: Callable[[str], str]) -> Any:
    """Return a copy of a JSON-like object with every dict key passed through convert."""
    if isinstance(obj, list):
        return [convert_keys(item, convert) for item in obj]

    if isinstance(obj, dict):
        return {
            (convert(key) if isinstance(key, str) else key): convert_keys(value, convert)
            for key, value in obj.items()
        }

    return obj


def camelize_keys(obj: Any) -> Any:
    return convert_keys(obj, to_camel)


def snakeize_keys(obj: Any) -> Any:
    return convert_keys(obj, to_snake)
