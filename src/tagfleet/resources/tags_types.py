"""Types, structures, and normalization for the tag catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Required, TypedDict, Union
from typing_extensions import ReadOnly

from ._common_types import DomainType, TagStatus, _normalize_domain_type, _normalize_status
from ..utils import first_present

__all__ = [
    "BikeProfile",
    "CarProfile",
    "KidProfile",
    "PROFILE_KEYS",
    "PaginationMeta",
    "PetProfile",
    "Profile",
    "Tag",
    "TagPage",
    "TagQuery",
    "TagResponse",
]

#region --- PROFILE VARIANTS ---

class CarProfile(TypedDict, total=False):
    vehicleNumber: Required[str]
    vehicleType: str


class BikeProfile(TypedDict, total=False):
    vehicleNumber: Required[str]
    bikeModel: str


class PetProfile(TypedDict, total=False):
    petName: Required[str]
    breedInfo: str


class KidProfile(TypedDict, total=False):
    displayName: Required[str]
    medicalAlerts: str


Profile = Union[CarProfile, BikeProfile, PetProfile, KidProfile]

# Wire key holding each variant's profile on a tag payload.
PROFILE_KEYS: dict[DomainType, str] = {
    "CAR": "carProfile",
    "BIKE": "bikeProfile",
    "PET": "petProfile",
    "KID": "kidProfile",
}

# Envelope keys that never belong to a profile.
_ENVELOPE_ONLY_KEYS = frozenset({"nickname", "status"})

#endregion


#region --- WIRE SHAPES ---

class TagResponse(TypedDict, total=False):
    """Readonly tag dict returned by tag endpoints."""
    id: ReadOnly[str]
    code: ReadOnly[str]
    nickname: ReadOnly[Optional[str]]
    status: ReadOnly[TagStatus]
    domainType: ReadOnly[DomainType]
    vendorId: ReadOnly[str]
    companyId: ReadOnly[str]
    profile: ReadOnly[dict[str, Any]]
    carProfile: ReadOnly[CarProfile]
    bikeProfile: ReadOnly[BikeProfile]
    petProfile: ReadOnly[PetProfile]
    kidProfile: ReadOnly[KidProfile]


class PaginationMeta(TypedDict, total=False):
    """Pagination block returned with enveloped tag listings."""
    total: ReadOnly[int]
    page: ReadOnly[int]
    limit: ReadOnly[int]
    totalPages: ReadOnly[int]


class TagQuery(TypedDict, total=False):
    """Query parameters for the tag listing endpoint."""
    vendorId: str
    status: TagStatus
    search: str
    page: Required[int]
    limit: Required[int]

#endregion


#region --- TAG MODEL ---

@dataclass(frozen=True)
class Tag:
    """A tag envelope with the profile variant selected by ``domain_type``."""

    id: str
    code: str
    status: Optional[TagStatus]
    domain_type: DomainType
    vendor_id: Optional[str] = None
    nickname: Optional[str] = None
    profile: Mapping[str, Any] = field(default_factory=dict)
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any], *, domain_type: Optional[DomainType] = None) -> "Tag":
        """Build a tag from its wire dict.

        Parameters
        ----------
        payload
            Tag dict as returned by the listing endpoint.
        domain_type
            Type to assume when the payload omits ``domainType``.

        Raises
        ------
        ValueError
            If the id or domain type is missing or invalid. A missing or
            unrecognized status becomes ``None``; the wire value stays on ``raw``.
        """
        tag_id = payload.get("id")
        if tag_id is None or (isinstance(tag_id, str) and not tag_id.strip()):
            raise ValueError(f"Tag is missing an id: {payload!r}")

        resolved_type = _normalize_domain_type(payload.get("domainType") or domain_type)
        try:
            status: Optional[TagStatus] = _normalize_status(payload.get("status"))
        except ValueError:
            status = None

        profile = payload.get(PROFILE_KEYS[resolved_type])
        if not isinstance(profile, Mapping):
            profile = payload.get("profile")
        if not isinstance(profile, Mapping):
            profile = {}

        vendor_id = payload.get("vendorId") or payload.get("companyId")
        nickname = payload.get("nickname")
        return cls(
            id=str(tag_id),
            code=str(payload.get("code") or ""),
            status=status,
            domain_type=resolved_type,
            vendor_id=str(vendor_id) if vendor_id is not None else None,
            nickname=nickname if isinstance(nickname, str) else None,
            profile={k: v for k, v in profile.items() if k not in _ENVELOPE_ONLY_KEYS},
            raw=dict(payload),
        )

#endregion


#region --- LISTING NORMALIZATION ---

class TagPage(TypedDict):
    """Normalized listing result: tags plus optional pagination metadata."""
    tags: list[Tag]
    meta: Optional[PaginationMeta]


def _normalize_pagination(value: object) -> Optional[PaginationMeta]:
    """Coerce a pagination block to ints, or None when it is unusable."""
    if not isinstance(value, Mapping):
        return None
    meta: dict[str, int] = {}
    for key in ("total", "page", "limit", "totalPages"):
        raw_value = value.get(key)
        if raw_value is None:
            continue
        try:
            meta[key] = int(raw_value)
        except (TypeError, ValueError):
            continue
    return meta  # type: ignore[return-value]


def _normalize_tag_page(
    payload: object,
    *,
    domain_type: Optional[DomainType] = None,
) -> tuple[TagPage, list[str] | None]:
    """Normalize either listing shape to a ``TagPage`` and return errors.

    ``{"tags": [...], "pagination"|"meta": {...}}`` yields the tags and the
    first present metadata block; a bare list is the flat tag list with no
    metadata.

    Raises
    ------
    ValueError
        If the payload is neither shape.
    """
    if isinstance(payload, list):
        entries: list[object] = payload
        meta = None
    elif isinstance(payload, Mapping) and isinstance(payload.get("tags"), list):
        entries = payload["tags"]
        meta = _normalize_pagination(first_present(payload, ("pagination", "meta")))
    else:
        raise ValueError(f"Unexpected tag listing response: {type(payload).__name__}")

    tags: list[Tag] = []
    entry_errors: list[str] | None = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            entry_errors.append(f"{index}: not an object")
            continue
        try:
            tags.append(Tag.from_response(entry, domain_type=domain_type))
        except ValueError as exc:
            entry_errors.append(f"{index}: {exc}")

    entry_errors = entry_errors if entry_errors else None
    return {"tags": tags, "meta": meta}, entry_errors

#endregion
