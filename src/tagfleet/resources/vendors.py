"""Vendor resource wrapper."""

from __future__ import annotations

from typing import Optional, cast

from .base import Resource
from .vendors_types import VendorResponse


class Vendors(Resource):
    """Vendor lookups."""

    def list(
        self,
        *,
        timeout: Optional[int] = None,
        raise_on_error: Optional[bool] = None,
    ) -> list[VendorResponse] | None:
        """Fetch all vendors.

        Parameters
        ----------
        timeout
            Request timeout in seconds.
        raise_on_error
            Per-call override of the client's ``raise_on_error`` setting.

        Returns
        -------
        list[VendorResponse] or None
            List of vendor dicts, or ``None`` on error.
        """
        response = self._get("/vendors", timeout=timeout, raise_on_error=raise_on_error)
        if response is None:
            return None

        vendors = response.get("vendors") if isinstance(response, dict) else response
        if isinstance(vendors, list):
            return [cast(VendorResponse, vendor) for vendor in vendors if isinstance(vendor, dict)]
        self._logger.warning("Vendors response missing expected vendors list.")
        return None
