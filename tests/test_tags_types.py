import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from tagfleet.resources.tags_types import (  # noqa: E402
    PROFILE_KEYS,
    Tag,
    _normalize_pagination,
    _normalize_tag_page,
)

TAG = {
    "id": "t1",
    "code": "TG-001",
    "nickname": "Family car",
    "status": "ACTIVE",
    "domainType": "CAR",
    "vendorId": "v1",
    "company": {"name": "Acme"},
    "carProfile": {"vehicleNumber": "TN01AB1234", "vehicleType": "SUV", "ownerName": "Ravi"},
}
META = {"total": 1, "page": 1, "limit": 10, "totalPages": 1}


class TagFromResponseTests(unittest.TestCase):
    def test_profile_keys_cover_every_domain_type(self):
        self.assertEqual(set(PROFILE_KEYS), {"CAR", "BIKE", "PET", "KID"})

    def test_envelope_and_profile(self):
        tag = Tag.from_response(TAG)
        self.assertEqual(tag.id, "t1")
        self.assertEqual(tag.code, "TG-001")
        self.assertEqual(tag.nickname, "Family car")
        self.assertEqual(tag.status, "ACTIVE")
        self.assertEqual(tag.domain_type, "CAR")
        self.assertEqual(tag.vendor_id, "v1")
        self.assertEqual(tag.profile["vehicleNumber"], "TN01AB1234")
        self.assertEqual(tag.profile["ownerName"], "Ravi")
        self.assertEqual(tag.raw["company"], {"name": "Acme"})

    def test_generic_profile_key_and_company_id(self):
        payload = {
            "id": 5,
            "status": "minted",
            "domainType": "pet",
            "companyId": "c9",
            "profile": {"petName": "Bruno", "status": "ignored"},
        }
        tag = Tag.from_response(payload)
        self.assertEqual(tag.id, "5")
        self.assertEqual(tag.domain_type, "PET")
        self.assertEqual(tag.status, "MINTED")
        self.assertEqual(tag.vendor_id, "c9")
        self.assertEqual(dict(tag.profile), {"petName": "Bruno"})
        self.assertIsNone(tag.nickname)

    def test_specific_profile_key_wins(self):
        payload = {"id": "k", "status": "ACTIVE", "domainType": "KID",
                   "kidProfile": {"displayName": "Asha"}, "profile": {"displayName": "Other"}}
        self.assertEqual(Tag.from_response(payload).profile["displayName"], "Asha")

    def test_default_domain_type(self):
        payload = {"id": "b", "status": "ACTIVE", "bikeProfile": {"vehicleNumber": "KA01"}}
        tag = Tag.from_response(payload, domain_type="BIKE")
        self.assertEqual(tag.domain_type, "BIKE")
        self.assertEqual(tag.profile["vehicleNumber"], "KA01")

    def test_missing_profile(self):
        tag = Tag.from_response({"id": "x", "status": "ACTIVE", "domainType": "CAR"})
        self.assertEqual(dict(tag.profile), {})

    def test_invalid_payloads(self):
        for payload in (
            {"status": "ACTIVE", "domainType": "CAR"},
            {"id": " ", "status": "ACTIVE", "domainType": "CAR"},
            {"id": "x", "status": "ACTIVE", "domainType": "BOAT"},
        ):
            with self.assertRaises(ValueError):
                Tag.from_response(payload)

    def test_unrecognized_status_kept_as_none(self):
        for status in ("EXPIRED", None, 7):
            tag = Tag.from_response({**TAG, "status": status})
            self.assertIsNone(tag.status)
            self.assertEqual(tag.raw["status"], status)
        missing = {key: value for key, value in TAG.items() if key != "status"}
        self.assertIsNone(Tag.from_response(missing).status)

    def test_raw_not_part_of_equality(self):
        first = Tag.from_response(TAG)
        second = Tag.from_response({**TAG, "company": {"name": "Other"}})
        self.assertEqual(first, second)


class TagPageNormalizationTests(unittest.TestCase):
    def test_three_shapes_normalize_alike(self):
        with_pagination, _ = _normalize_tag_page({"tags": [TAG], "pagination": META})
        with_meta, _ = _normalize_tag_page({"tags": [TAG], "meta": META})
        flat, _ = _normalize_tag_page([TAG])

        self.assertEqual(with_pagination, with_meta)
        self.assertEqual(with_pagination["meta"], META)
        self.assertEqual(flat["tags"], with_pagination["tags"])
        self.assertIsNone(flat["meta"])
        self.assertEqual(set(flat), {"tags", "meta"})

    def test_pagination_wins_over_meta(self):
        page, _ = _normalize_tag_page({"tags": [], "pagination": META, "meta": {"total": 99}})
        self.assertEqual(page["meta"], META)

    def test_meta_used_when_pagination_null(self):
        page, _ = _normalize_tag_page({"tags": [], "pagination": None, "meta": META})
        self.assertEqual(page["meta"], META)

    def test_envelope_without_meta(self):
        page, errors = _normalize_tag_page({"tags": [TAG]})
        self.assertIsNone(page["meta"])
        self.assertIsNone(errors)

    def test_malformed_payloads(self):
        for payload in ({"vendors": []}, {"tags": "nope"}, "text", None):
            with self.assertRaises(ValueError):
                _normalize_tag_page(payload)

    def test_entry_errors_reported(self):
        page, errors = _normalize_tag_page([TAG, 3, {"id": "x"}])
        self.assertEqual(len(page["tags"]), 1)
        self.assertEqual(len(errors), 2)
        self.assertTrue(errors[0].startswith("1:"))

    def test_unrecognized_statuses_keep_every_entry(self):
        entries = [TAG, {**TAG, "id": "t2", "status": None}, {**TAG, "id": "t3", "status": "EXPIRED"}]
        page, errors = _normalize_tag_page({"tags": entries, "pagination": {**META, "total": 3}})
        self.assertIsNone(errors)
        self.assertEqual([tag.id for tag in page["tags"]], ["t1", "t2", "t3"])
        self.assertEqual([tag.status for tag in page["tags"]], ["ACTIVE", None, None])

    def test_normalize_pagination_coerces_ints(self):
        self.assertEqual(
            _normalize_pagination({"total": "12", "page": 2, "limit": 10, "totalPages": "2", "x": 1}),
            {"total": 12, "page": 2, "limit": 10, "totalPages": 2},
        )
        self.assertEqual(_normalize_pagination({"total": "many"}), {})
        self.assertIsNone(_normalize_pagination([1]))


if __name__ == "__main__":
    unittest.main()
