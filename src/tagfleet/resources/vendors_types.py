"""Types for the vendors resource.

Vendors are read-only from the tag catalog's point of view; no input
normalization is needed here.
"""

from __future__ import annotations

from typing import Optional, TypedDict
from typing_extensions import ReadOnly


class VendorResponse(TypedDict, total=False):
    """Readonly vendor dict returned by the vendors endpoint."""
    id: ReadOnly[str]
    name: ReadOnly[str]
    logoUrl: ReadOnly[Optional[str]]
    qrDesignUrl: ReadOnly[Optional[str]]
    contactEmail: ReadOnly[Optional[str]]
    createdAt: ReadOnly[str]

__all__ = ["VendorResponse"]
