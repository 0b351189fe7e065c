"""CSV writer: one row per timing phase, record fields repeated on each row."""

import csv
from pathlib import Path
from typing import TextIO, Union

from dynamsg.models import MessagRecord, Phase

RECORD_COLUMNS = [
    "file", "version", "date", "revision", "time", "licensed_to", "issued_by",
    "platform", "os_level", "compiler", "hostname", "precision", "svn_version",
    "input_file", "num_cpus", "normal_termination", "elapsed_time",
]
PHASE_COLUMNS = [
    "parent", "phase", "cpu_seconds", "cpu_percent", "clock_seconds", "clock_percent",
]
CSV_COLUMNS = RECORD_COLUMNS + PHASE_COLUMNS


def _phase_cells(parent: str, phase: Phase) -> list:
    return [
        parent, phase.name, phase.cpu_seconds, phase.cpu_percent,
        phase.clock_seconds, phase.clock_percent,
    ]


def iter_rows(records: list[MessagRecord]):
    for record in records:
        base = [getattr(record, col) for col in RECORD_COLUMNS]
        if not record.phases:
            yield base + [""] * len(PHASE_COLUMNS)
            continue
        for phase in record.phases:
            yield base + _phase_cells("", phase)
            for child in phase.children:
                yield base + _phase_cells(phase.name, child)


def write_csv_report(records: list[MessagRecord], target: Union[Path, TextIO]):
    if isinstance(target, (str, Path)):
        with open(target, "w", encoding="utf-8", newline="") as f:
            _write(records, f)
    else:
        _write(records, target)


def _write(records: list[MessagRecord], stream: TextIO):
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)
    writer.writerows(iter_rows(records))
