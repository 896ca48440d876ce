"""CSV trace logging for vector state."""

from __future__ import annotations

import csv
from pathlib import Path

from . import config
from .math.vector import Vector, format_fixed
from .settings_schema import VectorSettings


class VectorLogger:
    def __init__(
        self,
        path: str | Path,
        precision: int | None = None,
        log_angles: bool = config.DEFAULT_LOG_ANGLES,
    ) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.precision = config.DEFAULT_PRECISION if precision is None else precision
        self.log_angles = log_angles
        self.rows_written = 0

        self._file = self.path.open("w", newline="")
        self._writer = csv.writer(self._file)
        self._writer.writerow(self._header())

    @classmethod
    def from_settings(cls, path: str | Path, settings: VectorSettings) -> "VectorLogger":
        return cls(path, precision=settings.precision, log_angles=settings.log_angles)

    def _header(self) -> list[str]:
        header = ["label", "x", "y", "length"]
        if self.log_angles:
            header.append("angle_deg")
        return header

    def log(self, vector: Vector, label: str = "") -> None:
        fixed = vector.to_fixed(self.precision)
        row = [label, fixed["x"], fixed["y"], format_fixed(vector.length(), self.precision)]
        if self.log_angles:
            row.append(format_fixed(vector.angle_deg(), self.precision))
        self._writer.writerow(row)
        self.rows_written += 1

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
