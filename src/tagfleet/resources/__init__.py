"""Resource module exports."""

from .tags import Tags
from .vendors import Vendors

__all__ = [
    "Tags",
    "Vendors",
]
