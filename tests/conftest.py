"""Shared fixtures: builders for synthetic fixed-column message files."""

import pytest

TIMING_BLOCK_HEAD = [
    " T i m i n g   i n f o r m a t i o n",
    "                        CPU(seconds)   %CPU  Clock(seconds) %Clock",
    "  ----------------------------------------------------------------",
]
TIMING_RULE = "  ----------------------------------------------------------------"


def put(*parts) -> str:
    """Place each (column, text) pair at its column, padding with spaces."""
    line = ""
    for col, text in parts:
        line = line.ljust(col) + text
    return line


def timing_row(name, cpu, cpu_pct, clock, clock_pct, child=False) -> str:
    label = (("    " if child else "  ") + name + " ").ljust(25, ".")[:25]
    return f"{label}{cpu:11.4E}{cpu_pct:8.2f}{clock:14.4E}{clock_pct:8.2f}"


def header_lines(version="smp d R9.3.0", extra=()) -> list[str]:
    return [
        put((5, "*" * 50)),
        put((5, "|  Version : "), (18, version), (34, "Date: 10/12/2018"), (55, "|")),
        put((5, "|  Revision: "), (18, "133014"), (34, "Time: 14:28:16"), (55, "|")),
        put((5, "|  Licensed to: "), (21, "ACME Engineering"), (55, "|")),
        put((5, "|  Issued by  : "), (21, "LSTC"), (55, "|")),
        put((5, "|  Platform   : "), (21, "Xeon64 System"), (55, "|")),
        put((5, "|  OS Level   : "), (21, "Linux CentOS 7"), (55, "|")),
        put((5, "|  Compiler   : "), (21, "Intel Fortran XE 2013"), (55, "|")),
        put((5, "|  Hostname   : "), (21, "node01"), (55, "|")),
        put((5, "|  Precision  : "), (21, "Double precision (I8R8)"), (55, "|")),
        put((5, "|  SVN Version: "), (21, "133014"), (55, "|")),
        put((5, "*" * 50)),
        "",
        put((1, "Input file: "), (13, "model/main.k")),
        *extra,
    ]


def footer_lines(cpus=4, elapsed="123", normal=True) -> list[str]:
    lines = [put((2, "T o t a l s"), (25, "1.2300E+02 100.00    1.2300E+02  100.00"))]
    lines.append(put((0, " Number of CPU's"), (16, f"{cpus:5d}")))
    if normal:
        lines.append(" N o r m a l    t e r m i n a t i o n                   10/12/18 14:30:19")
    lines.append(f" Elapsed time {elapsed} seconds for 1000 cycles using  4 SMP threads")
    return lines


def build_messag(version="smp d R9.3.0", rows=None, header_extra=(), **footer) -> str:
    if rows is None:
        rows = [
            timing_row("Keyword Processing", 0.01, 0.01, 0.0101, 0.01),
            timing_row("Element processing", 80.0, 65.04, 80.5, 65.12),
            timing_row("Solids", 50.0, 40.65, 50.2, 40.61, child=True),
            timing_row("Shells", 30.0, 24.39, 30.3, 24.51, child=True),
            timing_row("Contact algorithm", 43.0, 34.95, 43.1, 34.87),
        ]
    lines = header_lines(version, header_extra) + [""] + TIMING_BLOCK_HEAD + rows
    lines += [TIMING_RULE] + footer_lines(**footer)
    return "\n".join(lines) + "\n"


@pytest.fixture()
def write_messag(tmp_path):
    """Write a synthetic message file and return its path."""

    def _write(name="messag", **kwargs):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(build_messag(**kwargs), encoding="utf-8")
        return path

    return _write
