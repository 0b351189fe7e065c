"""Parser for LS-DYNA messag / mesXXXX files (header, timing table, footer)."""

import logging
import re
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

from dynamsg.errors import MessagReadError
from dynamsg.models import MessagRecord, RunType
from dynamsg.paths import PathOptions, format_path

logger = logging.getLogger(__name__)


# --- Header labels: (label, attribute, kind, start, end) ---
HEADER_FIELDS = [
    ("Licensed to: ", "licensed_to", str, 21, 55),
    ("Issued by  : ", "issued_by", str, 21, 55),
    ("Platform   : ", "platform", str, 21, 55),
    ("OS Level   : ", "os_level", str, 21, 55),
    ("Compiler   : ", "compiler", str, 21, 55),
    ("Hostname   : ", "hostname", str, 21, 55),
    ("Precision  : ", "precision", str, 21, 55),
    ("SVN Version: ", "svn_version", int, 21, 55),
    ("Input file: ", "input_file", str, 13, 84),
]
LABEL_VERSION = "Version : "
LABEL_REVISION = "Revision: "
LABEL_MPP_CPUS = " MPP execution with"

# --- Section markers ---
TIMING_MARKER = "T i m i n g   i n f o r m a t i o n"
TIMING_HEADER_LINES = 2
TIMING_END_MARKER = "-----------------------"
CHILD_INDENT = "    "

# --- Timing table columns ---
COL_NAME = (0, 25)
COL_CPU_SEC = (25, 36)
COL_CPU_PCT = (36, 44)
COL_CLOCK_SEC = (44, 58)
COL_CLOCK_PCT = (58, 66)

# --- Footer ---
LABEL_SMP_CPUS = " Number of CPU's"
LABEL_NORMAL_TERM = " N o r m a l    t e r m i n a t i o n"
LABEL_ELAPSED = " Elapsed time"
RE_ELAPSED = re.compile(r'^ Elapsed time\s*(\d+)\s*seconds')


class ParseState(Enum):
    HEADER = "header"
    TIMING_HEADER_SKIP = "timing_header_skip"
    TIMING_BODY = "timing_body"
    FOOTER = "footer"


def _text(line: str, start: int, end: int) -> str:
    return line[start:end].strip(" ")


def _name(line: str, start: int, end: int) -> str:
    """Column text with dot-fill removed: 'Contact algorithm ....' -> 'Contact algorithm'."""
    return line[start:end].strip(" ").rstrip(".").rstrip(" ")


def _safe_float(s: str) -> float:
    try:
        return float(s.strip())
    except (ValueError, TypeError):
        return 0.0


def _safe_int(s: str) -> int:
    try:
        return int(s.strip())
    except (ValueError, TypeError):
        return 0


def classify_version(version: str) -> RunType:
    if "smp" in version:
        return RunType.SMP
    if "mpp" in version:
        return RunType.MPP
    return RunType.UNKNOWN


class MessagParser:
    """Single-pass parser for one message file."""

    def __init__(self, filepath: Path, path_options: Optional[PathOptions] = None,
                 encoding: str = "utf-8"):
        self.filepath = Path(filepath)
        self.path_options = path_options
        self.encoding = encoding

    def parse(self) -> MessagRecord:
        try:
            with open(self.filepath, "r", encoding=self.encoding, errors="replace") as f:
                record = parse_lines(f, file=format_path(self.filepath, self.path_options))
        except OSError as e:
            raise MessagReadError(self.filepath, e) from e
        logger.debug(
            "Parsed %s: %d phases, %d cpus, elapsed %.0fs",
            self.filepath, len(record.phases), record.num_cpus, record.elapsed_time,
        )
        return record


def parse_lines(lines: Iterable[str], file: str = "") -> MessagRecord:
    """Build a record from already-decoded lines (trailing newlines are ignored)."""
    record = MessagRecord(file=file)
    state = ParseState.HEADER
    skipped = 0
    current_parent: Optional[int] = None

    for raw in lines:
        line = raw.rstrip("\r\n")

        if state == ParseState.HEADER:
            if line.lstrip(" ").startswith(TIMING_MARKER):
                state = ParseState.TIMING_HEADER_SKIP
                continue
            _parse_header_line(record, line)
            continue

        if state == ParseState.TIMING_HEADER_SKIP:
            skipped += 1
            if skipped >= TIMING_HEADER_LINES:
                state = ParseState.TIMING_BODY
            continue

        if state == ParseState.TIMING_BODY:
            if TIMING_END_MARKER in line:
                state = ParseState.FOOTER
                continue
            if not line.strip():
                continue
            name = _name(line, *COL_NAME)
            values = (
                _safe_float(line[slice(*COL_CPU_SEC)]),
                _safe_float(line[slice(*COL_CPU_PCT)]),
                _safe_float(line[slice(*COL_CLOCK_SEC)]),
                _safe_float(line[slice(*COL_CLOCK_PCT)]),
            )
            if not line.startswith(CHILD_INDENT):
                current_parent = record.add_parent(name, *values)
            elif current_parent is None:
                logger.debug("Skipping timing row %r with no parent phase", name)
            else:
                record.add_child(current_parent, name, *values)
            continue

        _parse_footer_line(record, line)

    return record


def _parse_header_line(record: MessagRecord, line: str):
    if LABEL_VERSION in line:
        record.version = _text(line, 18, 34)
        record.date = _text(line, 34, 55)
        record.run_type = classify_version(record.version)
        return
    if LABEL_REVISION in line:
        record.revision = _safe_int(line[18:34])
        record.time = _text(line, 34, 55)
        return
    for label, attr, kind, start, end in HEADER_FIELDS:
        if label in line:
            if kind is int:
                setattr(record, attr, _safe_int(line[start:end]))
            else:
                setattr(record, attr, _text(line, start, end))
            return
    if record.run_type == RunType.MPP and line.startswith(LABEL_MPP_CPUS):
        record.num_cpus = _safe_int(line[19:27])


def _parse_footer_line(record: MessagRecord, line: str):
    if record.run_type == RunType.SMP and line.startswith(LABEL_SMP_CPUS):
        record.num_cpus = _safe_int(line[16:21])
        return
    if line.startswith(LABEL_NORMAL_TERM):
        record.normal_termination = True
        return
    if line.startswith(LABEL_ELAPSED):
        # Not fixed-width, so matched by pattern.
        m = RE_ELAPSED.match(line)
        if m:
            record.elapsed_time = _safe_float(m.group(1))


def parse_messag_file(filepath: Path, path_options: Optional[PathOptions] = None) -> MessagRecord:
    """Parse a single message file."""
    return MessagParser(filepath, path_options).parse()


def discover_messag_files(paths: Iterable[Path]) -> list[Path]:
    """Expand directories to the messag and mesXXXX files they contain."""
    files: list[Path] = []
    for p in paths:
        p = Path(p)
        if p.is_dir():
            found = [p / "messag"] if (p / "messag").is_file() else []
            found.extend(sorted(p.glob("mes[0-9][0-9][0-9][0-9]")))
            if not found:
                logger.warning("No message files found in %s", p)
            files.extend(found)
        else:
            files.append(p)
    return files
