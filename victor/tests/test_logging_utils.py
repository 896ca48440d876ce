import csv
import tempfile
import unittest
from pathlib import Path

from victor.logging_utils import VectorLogger
from victor.math.vector import Vector
from victor.settings_schema import VectorSettings


def read_rows(path: Path) -> list[list[str]]:
    with path.open(newline="") as handle:
        return list(csv.reader(handle))


class VectorLoggerTests(unittest.TestCase):
    def test_writes_header_and_rows(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "traces" / "run.csv"
            with VectorLogger(path, precision=2) as logger:
                logger.log(Vector(3.0, 4.0), label="start")
                logger.log(Vector(0.0, -1.0))
                self.assertEqual(logger.rows_written, 2)

            rows = read_rows(path)
            self.assertEqual(rows[0], ["label", "x", "y", "length", "angle_deg"])
            self.assertEqual(rows[1], ["start", "3.00", "4.00", "5.00", "53.13"])
            self.assertEqual(rows[2], ["", "0.00", "-1.00", "1.00", "-90.00"])

    def test_from_settings_without_angles(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "run.csv"
            logger = VectorLogger.from_settings(path, VectorSettings(precision=1, log_angles=False))
            logger.log(Vector(1.25, 0.0), label="a")
            logger.close()
            logger.close()

            rows = read_rows(path)
            self.assertEqual(rows[0], ["label", "x", "y", "length"])
            self.assertEqual(rows[1], ["a", "1.3", "0.0", "1.3"])

    def test_logging_does_not_mutate_vector(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            vector = Vector(1.0, 2.0)
            with VectorLogger(Path(tmpdir) / "run.csv") as logger:
                logger.log(vector)
            self.assertEqual(vector, Vector(1.0, 2.0))


if __name__ == "__main__":
    unittest.main()
