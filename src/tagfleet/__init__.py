"""Public package surface for the tagfleet Python client."""

from .client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, TagFleet
from .errors import ServerError, TagFleetError, TransportError
from .resources.tags_types import Tag
from .session import SessionContext

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "ServerError",
    "SessionContext",
    "Tag",
    "TagFleet",
    "TagFleetError",
    "TransportError",
]
