"""
clusterparams/models/validator.py

Validates untyped data (e.g. parsed YAML) against a pydantic-based type using
TypeAdapter.
"""

from typing import Any, Type, TypeVar
from pydantic import ValidationError, TypeAdapter

T = TypeVar("T")


def validate_type(obj: Any, expected_type: Type[T], what: str = "") -> T:
    """
    Validates that a given Python object conforms to the expected type.

    Args:
        obj (Any): The object to validate, typically a dict from a YAML document.
        expected_type (Type[T]): The pydantic model (or any type) to validate against.
        what (str): Optional label used in the error message.

    Returns:
        T: The validated object, cast to the expected type.

    Raises:
        ValueError: If validation fails.
    """
    label = what or getattr(expected_type, "__name__", str(expected_type))
    try:
        return TypeAdapter(expected_type).validate_python(obj)
    except ValidationError as e:
        raise ValueError(f"Invalid {label}: {e}") from e
