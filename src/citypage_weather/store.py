"""Data store with freshness-aware JSON envelopes.

Files are organized into tiers by lifetime:
  - live/: Normalized feed output, valid until the next poll is due
  - state/: Engine state that may outlive the process (temperature cache snapshot)

Every file is wrapped in a metadata envelope with ``fetched_at`` and
optionally ``valid_until`` so consumers can tell stale output from fresh.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path  # noqa: TC003 - used at runtime, not just annotations
from typing import Any


class DataStore:
    """Manages read/write of enveloped JSON files with TTL."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.live = base_dir / "live"
        self.state = base_dir / "state"

    def read(self, path: Path) -> dict[str, Any] | None:
        """Read the data payload of an enveloped JSON file.

        Returns the ``data`` field, or None if the file doesn't exist.
        """
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            envelope: dict[str, Any] = json.load(f)
        return envelope.get("data", envelope)

    def write(
        self,
        path: Path,
        data: Any,
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Write data wrapped in a metadata envelope.

        Args:
            path: Relative path under base_dir (e.g. ``live/weather.json``).
            data: JSON-compatible payload stored under the ``data`` key.
            source: Data source identifier (e.g. ``"dd.weather.gc.ca"``).
            valid_until: Expiry timestamp. None means no expiry is tracked.
            **params: Extra metadata fields (site code, units, ...).

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        meta: dict[str, Any] = {
            "source": source,
            "fetched_at": datetime.now(UTC).isoformat(),
        }
        if valid_until is not None:
            meta["valid_until"] = valid_until.isoformat()
        if params:
            meta.update(params)

        with full.open("w") as f:
            json.dump({"meta": meta, "data": data}, f, indent=2)

        return full

    def read_meta(self, path: Path) -> dict[str, Any]:
        """Return the envelope metadata, or an empty dict if the file is missing."""
        full = self._resolve(path)
        if not full.exists():
            return {}
        with full.open() as f:
            envelope: dict[str, Any] = json.load(f)
        return envelope.get("meta", {})

    def is_fresh(self, path: Path) -> bool:
        """Check if a file exists and hasn't expired.

        Returns False if the file is missing, has no ``valid_until``, or
        the expiry time has passed.
        """
        valid_until = self.read_meta(path).get("valid_until")
        if valid_until is None:
            return False

        expiry = datetime.fromisoformat(valid_until)
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=UTC)
        return datetime.now(UTC) < expiry

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full
