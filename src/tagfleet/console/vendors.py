"""Session-scoped vendor list for filters and display."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from ..errors import TagFleetError
from ..resources.vendors_types import VendorResponse

if TYPE_CHECKING:  # pragma: no cover
    from ..client import TagFleet

_logger = logging.getLogger(__name__)


class VendorCache:
    """Loads the vendor list once; a failed load degrades to no vendors."""

    def __init__(self, client: "TagFleet", *, timeout: Optional[int] = None) -> None:
        self._client = client
        self.timeout = timeout
        self._vendors: Optional[list[VendorResponse]] = None

    @property
    def loaded(self) -> bool:
        return self._vendors is not None

    def load_vendors(self) -> list[VendorResponse]:
        if self._vendors is None:
            self._vendors = self._fetch()
        return list(self._vendors)

    def reload(self) -> list[VendorResponse]:
        self._vendors = None
        return self.load_vendors()

    def _fetch(self) -> list[VendorResponse]:
        try:
            vendors = self._client.vendors.list(timeout=self.timeout, raise_on_error=True)
        except TagFleetError as exc:
            _logger.warning("Could not load vendors: %s", exc)
            return []
        if vendors is None:
            return []
        return vendors

    def options(self) -> list[tuple[str, str]]:
        """Return ``(id, name)`` pairs for a vendor filter."""
        return [
            (str(vendor["id"]), str(vendor.get("name") or vendor["id"]))
            for vendor in self.load_vendors()
            if vendor.get("id") is not None
        ]

    def name_for(self, vendor_id: Optional[str]) -> Optional[str]:
        if vendor_id is None:
            return None
        for vendor in self.load_vendors():
            if str(vendor.get("id")) == str(vendor_id):
                return vendor.get("name")
        return None


__all__ = ["VendorCache"]
