"""Store of analysis results keyed by document, function and start line."""

import datetime
import json
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from complexity_cli.core.data_utils import load_json, save_json
from complexity_cli.core.exceptions import StoreError
from complexity_cli.core.logging import log_debug
from complexity_cli.engine import ComplexityVerdict


@dataclass(frozen=True)
class AnalysisKey:
    """Identity of one analysis: document uri, function name and start line."""

    document: str
    function: str
    start_line: int

    def __str__(self) -> str:
        return f"{self.document}:{self.function}:{self.start_line}"


@dataclass(frozen=True)
class AnalysisRecord:
    key: AnalysisKey
    verdict: ComplexityVerdict
    timestamp: str  # ISO format, UTC

    def to_dict(self) -> Dict[str, Any]:
        return {
            "document": self.key.document,
            "function": self.key.function,
            "start_line": self.key.start_line,
            **self.verdict.to_dict(),
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisRecord":
        try:
            key = AnalysisKey(
                document=str(data["document"]),
                function=str(data["function"]),
                start_line=int(data["start_line"]),
            )
            return cls(
                key=key,
                verdict=ComplexityVerdict.from_dict(data),
                timestamp=str(data["timestamp"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise StoreError(f"Malformed analysis record: {data!r}") from e


class ResultStore:
    """
    Holds the latest verdict per analysis key.

    Recording an existing key overwrites it; records are never removed
    otherwise. All access goes through a lock so readers always see a whole
    record. When a path is given the store is loaded from and saved to a
    JSON file.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path else None
        self._records: Dict[AnalysisKey, AnalysisRecord] = {}
        self._lock = threading.Lock()

        if self.path is not None:
            self._load()

    def record(
        self,
        key: AnalysisKey,
        verdict: ComplexityVerdict,
        timestamp: Optional[datetime.datetime] = None,
    ) -> AnalysisRecord:
        """Insert or overwrite the record for a key and persist the store."""
        captured = timestamp or datetime.datetime.now(datetime.timezone.utc)
        new_record = AnalysisRecord(key, verdict, captured.isoformat())

        with self._lock:
            self._records[key] = new_record
            self._save_locked()

        log_debug(f"Recorded {verdict.time_complexity}/{verdict.space_complexity} for {key}")
        return new_record

    def get(self, key: AnalysisKey) -> Optional[AnalysisRecord]:
        with self._lock:
            return self._records.get(key)

    def records(self, document: Optional[str] = None) -> List[AnalysisRecord]:
        """Return stored records, optionally for one document, sorted by location."""
        with self._lock:
            selected = [
                r
                for r in self._records.values()
                if document is None or r.key.document == document
            ]
        return sorted(selected, key=lambda r: (r.key.document, r.key.start_line, r.key.function))

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._records

    def _load(self) -> None:
        try:
            data = load_json(self.path, default={}, strict=True)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StoreError(f"Result store is corrupt: {self.path}: {e}") from e
        except OSError as e:
            raise StoreError(f"Could not read result store {self.path}: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("records", []), list):
            raise StoreError(f"Result store is corrupt: {self.path}")

        for item in data.get("records", []):
            loaded = AnalysisRecord.from_dict(item)
            self._records[loaded.key] = loaded

        log_debug(f"Loaded {len(self._records)} records from {self.path}")

    def _save_locked(self) -> None:
        if self.path is None:
            return

        payload = {
            "updated_at": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            "records": [r.to_dict() for r in self._records.values()],
        }
        try:
            os.makedirs(self.path.parent, exist_ok=True)
            save_json(self.path, payload)
        except OSError as e:
            raise StoreError(f"Could not save result store to {self.path}: {e}") from e
