"""Shared types and validation helpers for resources.

This module contains:
- Validation mode type (shared across all resources)
- Domain type and tag status literals
- Common validation normalizers (tag IDs, domain types, statuses)
"""

from __future__ import annotations

from typing import Literal, get_args

# --- Shared Validation Mode --- #
ValidationMode = Literal["off", "warn", "strict"]


# --- Domain Types --- #
DomainType = Literal["CAR", "BIKE", "PET", "KID"]
DOMAIN_TYPES: tuple[DomainType, ...] = get_args(DomainType)


def _normalize_domain_type(value: object) -> DomainType:
    """Normalize a domain type, accepting route-style lowercase names.

    Raises
    ------
    ValueError
        If the value is not one of ``DOMAIN_TYPES`` in any letter case.
    """
    if isinstance(value, str):
        candidate = value.strip().upper()
        if candidate in DOMAIN_TYPES:
            return candidate  # type: ignore[return-value]
    raise ValueError(f"Invalid domain type: {value!r}")


# --- Tag Statuses --- #
TagStatus = Literal["MINTED", "ACTIVE", "SUSPENDED", "REVOKED"]
TAG_STATUSES: tuple[TagStatus, ...] = get_args(TagStatus)


def _normalize_status(value: object) -> TagStatus:
    """Normalize a tag status (case-insensitive)."""
    if isinstance(value, str):
        candidate = value.strip().upper()
        if candidate in TAG_STATUSES:
            return candidate  # type: ignore[return-value]
    raise ValueError(f"Invalid tag status: {value!r}")


# --- Identifier Normalization --- #
def _normalize_tag_id(tag_id: object) -> str | None:
    """Normalize an opaque tag identifier to its string form.

    Returns
    -------
    str | None
        The identifier as a non-empty string, or None when the input is
        blank, a bool, a non-positive int, or any other type.
    """
    if isinstance(tag_id, bool):
        return None
    if isinstance(tag_id, int):
        return str(tag_id) if tag_id >= 1 else None
    if isinstance(tag_id, str) and tag_id.strip():
        return tag_id.strip()
    return None
