import tempfile
import unittest
from pathlib import Path

from victor import config
from victor.settings_schema import VectorSettings, load_last_used, save_last_used


class SettingsSchemaTests(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = VectorSettings()
        self.assertEqual(settings.precision, config.DEFAULT_PRECISION)
        self.assertEqual(settings.log_angles, config.DEFAULT_LOG_ANGLES)

    def test_save_and_load_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "settings.json"
            saved = save_last_used(VectorSettings(precision=3, log_angles=False), path)
            self.assertEqual(saved, path)
            self.assertEqual(load_last_used(path), VectorSettings(precision=3, log_angles=False))

    def test_missing_or_invalid_file_returns_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "settings.json"
            self.assertEqual(load_last_used(path), VectorSettings())
            path.write_text("{not json")
            self.assertEqual(load_last_used(path), VectorSettings())
            path.write_text("[1, 2]")
            self.assertEqual(load_last_used(path), VectorSettings())

    def test_unreadable_file_returns_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "settings.json"
            path.write_bytes(b"\xff\xfe{bad")
            self.assertEqual(load_last_used(path), VectorSettings())
            self.assertEqual(load_last_used(Path(tmpdir)), VectorSettings())

    def test_invalid_values_return_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "settings.json"
            for payload in ('{"precision": "abc"}', '{"precision": -2}', '{"precision": null}', '{"log_angles": "maybe"}'):
                path.write_text(payload)
                self.assertEqual(load_last_used(path), VectorSettings())

    def test_log_angles_parses_strings(self) -> None:
        self.assertFalse(VectorSettings.from_json({"log_angles": "false"}).log_angles)
        self.assertFalse(VectorSettings.from_json({"log_angles": "0"}).log_angles)
        self.assertTrue(VectorSettings.from_json({"log_angles": "Yes"}).log_angles)
        self.assertFalse(VectorSettings.from_json({"log_angles": False}).log_angles)
        with self.assertRaises(ValueError):
            VectorSettings.from_json({"log_angles": 2})

    def test_save_creates_parent_directories(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "dir" / "settings.json"
            save_last_used(VectorSettings(precision=5), path)
            self.assertTrue(path.read_text().endswith("\n"))
            self.assertEqual(load_last_used(path).precision, 5)

    def test_partial_payload_uses_defaults(self) -> None:
        settings = VectorSettings.from_json({"precision": "4"})
        self.assertEqual(settings.precision, 4)
        self.assertEqual(settings.log_angles, config.DEFAULT_LOG_ANGLES)

    def test_negative_precision_rejected(self) -> None:
        with self.assertRaises(ValueError):
            VectorSettings.from_json({"precision": -1})


if __name__ == "__main__":
    unittest.main()
