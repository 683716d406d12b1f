import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from tagfleet.console.schema import (  # noqa: E402
    ENVELOPE_FIELDS,
    build_form_state,
    field_names,
    fields_for,
    missing_required,
    required_field_names,
)
from tagfleet.resources.tags_types import Tag  # noqa: E402


def _tag(domain_type, profile, **envelope):
    return Tag(
        id="t1",
        code="TG-001",
        status=envelope.get("status", "ACTIVE"),
        domain_type=domain_type,
        nickname=envelope.get("nickname"),
        profile=profile,
    )


class FieldsForTests(unittest.TestCase):
    def test_known_types(self):
        expected = {
            "CAR": ("vehicleNumber", "vehicleType"),
            "BIKE": ("vehicleNumber", "bikeModel"),
            "PET": ("petName", "breedInfo"),
            "KID": ("displayName", "medicalAlerts"),
        }
        for domain_type, names in expected.items():
            fields = fields_for(domain_type)
            self.assertEqual(tuple(f.name for f in fields), names)
            self.assertEqual([f.required for f in fields], [True, False])
            self.assertTrue(all(f.kind == "text" for f in fields))
            self.assertEqual(fields_for(domain_type), fields)

    def test_labels(self):
        self.assertEqual([f.label for f in fields_for("PET")], ["Pet Name", "Breed Info"])

    def test_unknown_types_are_empty(self):
        for value in ("BOAT", "car", "", None, 1):
            self.assertEqual(fields_for(value), ())
            self.assertEqual(field_names(value), ())

    def test_required_field_names(self):
        self.assertEqual(required_field_names("KID"), ("displayName",))


class FormStateTests(unittest.TestCase):
    def test_exact_keys_for_every_type(self):
        for domain_type in ("CAR", "BIKE", "PET", "KID"):
            form = build_form_state(_tag(domain_type, {"extra": "dropped"}))
            self.assertEqual(set(form), {*ENVELOPE_FIELDS, *field_names(domain_type)})
            self.assertEqual(list(form)[:2], ["nickname", "status"])

    def test_seeded_values(self):
        tag = _tag("CAR", {"vehicleNumber": "TN01AB1234", "ownerName": "Ravi"}, nickname=None)
        self.assertEqual(
            build_form_state(tag),
            {"nickname": "", "status": "ACTIVE", "vehicleNumber": "TN01AB1234", "vehicleType": ""},
        )

    def test_unrecognized_status_seeds_blank(self):
        form = build_form_state(_tag("PET", {"petName": "Bruno"}, status=None))
        self.assertEqual(form["status"], "")

    def test_profile_values_kept(self):
        tag = _tag("PET", {"petName": "Bruno", "breedInfo": "Labrador"}, nickname="Dog", status="SUSPENDED")
        self.assertEqual(
            build_form_state(tag),
            {"nickname": "Dog", "status": "SUSPENDED", "petName": "Bruno", "breedInfo": "Labrador"},
        )

    def test_missing_required(self):
        self.assertEqual(missing_required("CAR", {"vehicleNumber": "  "}), ["vehicleNumber"])
        self.assertEqual(missing_required("CAR", {"vehicleNumber": "TN01"}), [])
        self.assertEqual(missing_required("BOAT", {}), [])


if __name__ == "__main__":
    unittest.main()
