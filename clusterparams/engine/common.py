"""
clusterparams/engine/common.py

Helpers shared by the derivers.
"""

from typing import List, Optional, Tuple, TypeVar

from clusterparams.errors import MissingRequiredFieldError
from clusterparams.models.images import OSImage

T = TypeVar("T")


def require(value: Optional[T], field: str) -> T:
    """
    Return `value`, or raise MissingRequiredFieldError if it is None or empty.
    """
    if value is None or value == "" or value == []:
        raise MissingRequiredFieldError(field)
    return value


def image_fields(prefix: str, image: OSImage) -> List[Tuple[str, str]]:
    """The four `osImage*` parameter names and values, prefixed with `prefix`."""
    return [
        (f"{prefix}osImageOffer", image.offer),
        (f"{prefix}osImageSKU", image.sku),
        (f"{prefix}osImagePublisher", image.publisher),
        (f"{prefix}osImageVersion", image.version),
    ]
