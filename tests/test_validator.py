import json
import tempfile
import unittest
from pathlib import Path

from people_synth.people import generate_people
from people_synth.seed import rng
from people_synth.validator import validate_dataset, validate_people
from people_synth.writer import write_people


class TestValidator(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, payload) -> Path:
        p = self.tmp / "people.json"
        p.write_text(json.dumps(payload), encoding="utf-8")
        return p

    def test_generated_dataset_is_valid(self):
        out = write_people(generate_people(200, rng(4)), self.tmp / "people.json")
        self.assertEqual(validate_dataset(out), [])

    def test_death_before_birth(self):
        errors = validate_people([{"name": "Ann Lee", "birthYear": 1960, "deathYear": 1950}])
        self.assertEqual(len(errors), 1)
        self.assertIn("Ann Lee", errors[0])
        self.assertTrue(errors[0].startswith("0:"))

    def test_out_of_range_and_types(self):
        errors = validate_people(
            [
                {"name": "A B", "birthYear": 1899, "deathYear": 1950},
                {"name": "C D", "birthYear": "1950", "deathYear": 1960},
                {"name": "", "birthYear": 1950, "deathYear": 2001},
            ]
        )
        joined = "\n".join(errors)
        self.assertIn("0/birthYear", joined)
        self.assertIn("1/birthYear", joined)
        self.assertIn("2/name", joined)
        self.assertIn("2/deathYear", joined)

    def test_extra_or_missing_keys(self):
        errors = validate_people([{"name": "A B", "birthYear": 1950, "deathYear": 1960, "age": 10}, {"name": "C D"}])
        joined = "\n".join(errors)
        self.assertIn("age", joined)
        self.assertIn("birthYear", joined)
        self.assertIn("deathYear", joined)

    def test_empty_list_and_wrong_root(self):
        self.assertTrue(validate_people([]))
        self.assertTrue(validate_people({"name": "A B"}))

    def test_unreadable_or_invalid_json(self):
        self.assertEqual(len(validate_dataset(self.tmp / "missing.json")), 1)
        bad = self.tmp / "bad.json"
        bad.write_text("[{,]", encoding="utf-8")
        errors = validate_dataset(bad)
        self.assertEqual(len(errors), 1)
        self.assertIn("Invalid JSON", errors[0])

    def test_file_round_trip_valid(self):
        path = self._write([{"name": "A B", "birthYear": 1900, "deathYear": 2000}])
        self.assertEqual(validate_dataset(path), [])


if __name__ == "__main__":
    unittest.main()
