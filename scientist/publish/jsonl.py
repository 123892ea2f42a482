"""Append published results to a JSON Lines file."""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import List, Optional

from .logging_module import LoggingCallbackModule
from ..config import get_settings
from ..core.result import Result
from ..schemas import ResultRecord, model_dump, model_validate


class JsonlRecorder(LoggingCallbackModule):
    """Record one :class:`ResultRecord` per published result.

    Appends are serialised with a lock so a single recorder can be shared by
    experiments running on several threads.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else get_settings().results_path
        self._lock = threading.Lock()

    def publish(self, result: Result) -> None:
        record = ResultRecord.from_result(result)
        line = json.dumps(model_dump(record))
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")
        super().publish(result)

    def records(self) -> List[ResultRecord]:
        if not self.path.is_file():
            return []
        records: List[ResultRecord] = []
        with self.path.open("r", encoding="utf-8") as handle:
            for line in handle:
                if not line.strip():
                    continue
                try:
                    records.append(model_validate(ResultRecord, json.loads(line)))
                except ValueError:
                    continue
        return records


__all__ = ["JsonlRecorder"]
