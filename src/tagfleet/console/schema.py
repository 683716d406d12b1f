"""Profile schema registry: which profile fields each tag type edits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..resources.tags_types import Tag
from ..utils import is_blank


@dataclass(frozen=True)
class ProfileField:
    name: str
    label: str
    kind: str = "text"
    required: bool = False


PROFILE_SCHEMAS: dict[str, tuple[ProfileField, ...]] = {
    "CAR": (
        ProfileField("vehicleNumber", "Vehicle Number", required=True),
        ProfileField("vehicleType", "Vehicle Type"),
    ),
    "BIKE": (
        ProfileField("vehicleNumber", "Vehicle Number", required=True),
        ProfileField("bikeModel", "Bike Model"),
    ),
    "PET": (
        ProfileField("petName", "Pet Name", required=True),
        ProfileField("breedInfo", "Breed Info"),
    ),
    "KID": (
        ProfileField("displayName", "Display Name", required=True),
        ProfileField("medicalAlerts", "Medical Alerts"),
    ),
}

ENVELOPE_FIELDS: tuple[str, ...] = ("nickname", "status")


def fields_for(domain_type: object) -> tuple[ProfileField, ...]:
    """Return the ordered profile fields for ``domain_type``.

    Unknown values (including other letter cases) yield an empty tuple.
    """
    if not isinstance(domain_type, str):
        return ()
    return PROFILE_SCHEMAS.get(domain_type, ())


def field_names(domain_type: object) -> tuple[str, ...]:
    return tuple(profile_field.name for profile_field in fields_for(domain_type))


def required_field_names(domain_type: object) -> tuple[str, ...]:
    return tuple(profile_field.name for profile_field in fields_for(domain_type) if profile_field.required)


def build_form_state(tag: Tag) -> dict[str, Any]:
    """Seed an edit form from a loaded tag.

    The result has exactly the envelope fields plus the schema fields of the
    tag's type. Profile values win for their own keys; absent values become
    empty strings. An unrecognized status seeds an empty status, which must be
    chosen before the form can be submitted.
    """
    form_state: dict[str, Any] = {}
    for name in ENVELOPE_FIELDS:
        value = getattr(tag, name)
        form_state[name] = "" if value is None else value
    for name in field_names(tag.domain_type):
        value = tag.profile.get(name)
        form_state[name] = "" if value is None else value
    return form_state


def missing_required(domain_type: object, form_state: Mapping[str, Any]) -> list[str]:
    """Return required profile fields that are blank in ``form_state``."""
    return [name for name in required_field_names(domain_type) if is_blank(form_state.get(name))]


__all__ = [
    "ENVELOPE_FIELDS",
    "PROFILE_SCHEMAS",
    "ProfileField",
    "build_form_state",
    "field_names",
    "fields_for",
    "missing_required",
    "required_field_names",
]
