from __future__ import annotations

"""
Runtime report of a single contextify run.

The walker fills the counters while it runs; the CLI logs the summary and
programmatic callers may serialize it with :meth:`RunReport.to_json`.
"""

import json
import time
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class RunReport:
    source: str = ''
    output: str = ''
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: Optional[float] = None
    duration_s: Optional[float] = None

    files_processed: int = 0
    lines_written: int = 0
    files_skipped: int = 0
    dirs_excluded: List[str] = field(default_factory=list)

    def add_file(self, lines: int) -> None:
        self.files_processed += 1
        self.lines_written += lines

    def add_skipped(self) -> None:
        self.files_skipped += 1

    def add_excluded_dir(self, relpath: str) -> None:
        self.dirs_excluded.append(relpath)

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "source": self.source,
                "output": self.output,
                "started_at": self.started_at,
                "finished_at": self.finished_at,
                "duration_s": self.duration_s,
                "files_processed": self.files_processed,
                "lines_written": self.lines_written,
                "files_skipped": self.files_skipped,
                "dirs_excluded": self.dirs_excluded,
            },
            indent=indent,
        )
