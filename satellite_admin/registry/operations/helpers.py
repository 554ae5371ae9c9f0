"""Helpers shared by operation builders."""

from typing import Any, Dict, Optional

from ..parameters import is_blank


def without_none(values: Dict[str, Any]) -> Dict[str, Any]:
    """Drop members whose value is None before JSON serialization."""
    return {key: value for key, value in values.items() if value is not None}


def blank_to_none(value: Any) -> Optional[Any]:
    """Treat a blank form value ("" or empty selection) as not provided."""
    return None if is_blank(value) else value
