from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, TextIO


def extracted_at() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass
class RecordWriter:
    """Emits one JSON record per line.

    With ``out_path`` set, records are appended to that JSON Lines file and
    stamped with ``extracted_at`` so files built over several runs stay
    traceable. Otherwise they go to ``stream`` unchanged.
    """

    out_path: Path | None = None
    stream: TextIO = field(default_factory=lambda: sys.stdout)
    written: int = 0

    def write(self, record: dict[str, Any]) -> None:
        if self.out_path is None:
            print(json.dumps(record, ensure_ascii=False), file=self.stream)
        else:
            stamped = dict(record)
            stamped.setdefault("extracted_at", extracted_at())
            self.out_path.parent.mkdir(parents=True, exist_ok=True)
            with self.out_path.open("a", encoding="utf-8", newline="\n") as f:
                f.write(json.dumps(stamped, ensure_ascii=False) + "\n")
        self.written += 1
