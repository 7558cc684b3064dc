"""Conversion of decoded values into JSON-ready data."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import Any


def to_plain_data(value: Any) -> Any:
    """Return ``value`` as nested dicts, lists and JSON scalars.

    Dataclasses and named tuples become dicts keyed by field name, dates are
    rendered in ISO format and decimals as strings to keep their precision.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            item.name: to_plain_data(getattr(value, item.name))
            for item in dataclasses.fields(value)
        }
    if isinstance(value, tuple) and hasattr(value, "_fields"):
        return {name: to_plain_data(getattr(value, name)) for name in value._fields}
    if isinstance(value, Mapping):
        return {str(key): to_plain_data(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [to_plain_data(item) for item in value]
    if isinstance(value, datetime | date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    if value is None or isinstance(value, str | int | float | bool):
        return value
    if hasattr(value, "__dict__"):
        return {key: to_plain_data(item) for key, item in vars(value).items()}
    return str(value)
