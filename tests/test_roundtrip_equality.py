import tempfile
import unittest
from pathlib import Path

from jsonml.decode import decode
from jsonml.encode import encode
from jsonml.io_utils import stable_json_dumps
from jsonml.verify_roundtrip import roundtrip, verify_roundtrip_all


def _write_document(path: Path, data: object) -> None:
    path.write_text(stable_json_dumps(data), encoding="utf-8")


class RoundtripEqualityTest(unittest.TestCase):
    def test_roundtrip_preserves_attributes_and_children(self) -> None:
        wire = ["div", {"id": "main", "hidden": False, "width": 1.5, "data-x": None}, "a", ["br"], "b"]
        element = decode(wire)

        self.assertEqual(roundtrip(element), element)
        self.assertEqual(encode(element), wire)

    def test_roundtrip_normalizes_empty_attributes(self) -> None:
        element = decode(["p", {}, "text"])

        self.assertEqual(encode(element), ["p", "text"])
        self.assertEqual(roundtrip(element), element)

    def test_verify_roundtrip_all_accepts_fixtures(self) -> None:
        ok, errors = verify_roundtrip_all(Path(__file__).parent / "fixtures")

        self.assertTrue(ok, errors)
        self.assertEqual(errors, [])

    def test_verify_roundtrip_all_reports_undecodable_documents(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            tmp_path = Path(tmp)
            _write_document(tmp_path / "good.json", ["p", "ok"])
            _write_document(tmp_path / "empty.json", [])

            ok, errors = verify_roundtrip_all(tmp_path)

        self.assertFalse(ok)
        self.assertEqual(len(errors), 1)
        self.assertTrue(errors[0].startswith("empty.json: "))

    def test_verify_roundtrip_all_accepts_nan_attributes(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            tmp_path = Path(tmp)
            _write_document(tmp_path / "nan.json", ["a", {"n": float("nan")}])

            ok, errors = verify_roundtrip_all(tmp_path)

        self.assertTrue(ok, errors)
        self.assertEqual(errors, [])

    def test_verify_roundtrip_all_reports_malformed_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            tmp_path = Path(tmp)
            (tmp_path / "truncated.json").write_text('["a",', encoding="utf-8")

            ok, errors = verify_roundtrip_all(tmp_path)

        self.assertFalse(ok)
        self.assertEqual(len(errors), 1)
        self.assertTrue(errors[0].startswith("truncated.json: "))


if __name__ == "__main__":
    unittest.main()
