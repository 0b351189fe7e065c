"""Batch driver: parse many message files, collecting per-file read errors."""

import logging
import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, TextIO

from dynamsg.errors import MessagReadError
from dynamsg.models import MessagRecord
from dynamsg.parsers.messag import MessagParser
from dynamsg.paths import PathOptions

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    records: list[MessagRecord] = field(default_factory=list)
    errors: list[tuple[Path, MessagReadError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class BatchParser:
    """Parse files in sorted path order; a bad file never aborts the batch."""

    def __init__(
        self,
        files: Iterable[Path],
        path_options: Optional[PathOptions] = None,
        jobs: int = 1,
        error_stream: Optional[TextIO] = None,
    ):
        self.files = sorted(Path(f) for f in files)
        self.path_options = path_options
        self.jobs = max(1, jobs)
        self.error_stream = error_stream if error_stream is not None else sys.stderr
        self._error_lock = threading.Lock()

    def run(self) -> BatchResult:
        logger.debug("Parsing %d files with %d worker(s)", len(self.files), self.jobs)
        if self.jobs == 1 or len(self.files) < 2:
            outcomes = [self._parse_one(f) for f in self.files]
        else:
            with ThreadPoolExecutor(max_workers=self.jobs) as pool:
                outcomes = list(pool.map(self._parse_one, self.files))

        result = BatchResult()
        for path, record, error in outcomes:
            if error is not None:
                result.errors.append((path, error))
            else:
                result.records.append(record)
        logger.info(
            "Parsed %d of %d files (%d failed)",
            len(result.records), len(self.files), len(result.errors),
        )
        return result

    def _parse_one(self, path: Path):
        try:
            record = MessagParser(path, self.path_options).parse()
        except MessagReadError as e:
            self._report_error(e)
            return path, None, e
        return path, record, None

    def _report_error(self, error: MessagReadError):
        with self._error_lock:
            print(error, file=self.error_stream)
            self.error_stream.flush()


def parse_messag_files(
    files: Iterable[Path],
    path_options: Optional[PathOptions] = None,
    jobs: int = 1,
    error_stream: Optional[TextIO] = None,
) -> BatchResult:
    """Parse all files; read errors go to ``error_stream`` (stderr by default)."""
    return BatchParser(files, path_options, jobs, error_stream).run()
