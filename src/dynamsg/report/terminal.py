"""Rich terminal output for parsed message records."""

import math
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from dynamsg.models import MessagRecord, Phase


def _fmt_elapsed(seconds: float) -> str:
    if not math.isfinite(seconds) or seconds <= 0:
        return "-"
    hours, rem = divmod(int(seconds), 3600)
    minutes, secs = divmod(rem, 60)
    return f"{seconds:.0f}s ({hours:d}:{minutes:02d}:{secs:02d})"


def _termination_label(record: MessagRecord) -> str:
    if record.normal_termination:
        return "[bold green]normal[/bold green]"
    return "[bold yellow]not found[/bold yellow]"


def render_records(
    records: list[MessagRecord],
    no_color: bool = False,
    show_phases: bool = False,
    console: Optional[Console] = None,
):
    """Render a summary table of all records, optionally followed by phase tables."""
    if console is None:
        console = Console(force_terminal=not no_color, no_color=no_color, highlight=False)

    if not records:
        console.print("[yellow]No message files parsed.[/yellow]")
        return

    summary = Table(title="LS-DYNA message summary", border_style="blue")
    summary.add_column("File", style="cyan")
    summary.add_column("Version")
    summary.add_column("Revision", justify="right")
    summary.add_column("Hostname")
    summary.add_column("Precision")
    summary.add_column("CPUs", justify="right")
    summary.add_column("Termination")
    summary.add_column("Elapsed", justify="right")

    for record in records:
        summary.add_row(
            escape(record.file),
            escape(record.version),
            str(record.revision) if record.revision else "-",
            escape(record.hostname),
            escape(record.precision),
            str(record.num_cpus) if record.num_cpus else "-",
            _termination_label(record),
            _fmt_elapsed(record.elapsed_time),
        )
    console.print(summary)

    if show_phases:
        for record in records:
            _render_phases(console, record)


def _phase_row(table: Table, phase: Phase, indent: str = ""):
    bar_len = int(phase.clock_percent / 2) if math.isfinite(phase.clock_percent) else 0
    table.add_row(
        indent + escape(phase.name),
        f"{phase.cpu_seconds:.4E}",
        f"{phase.cpu_percent:.2f}",
        f"{phase.clock_seconds:.4E}",
        f"{phase.clock_percent:.2f}",
        "[green]" + "#" * bar_len + "[/green]",
    )


def _render_phases(console: Console, record: MessagRecord):
    if not record.phases:
        console.print(Panel(f"{escape(record.file)}: no timing information", border_style="dim"))
        return

    table = Table(title=f"Timing: {escape(record.file)}", border_style="blue")
    table.add_column("Phase", style="cyan")
    table.add_column("CPU (s)", justify="right")
    table.add_column("CPU %", justify="right")
    table.add_column("Clock (s)", justify="right")
    table.add_column("Clock %", justify="right")
    table.add_column("Share", min_width=20)

    for phase in record.phases:
        _phase_row(table, phase)
        for child in phase.children:
            _phase_row(table, child, indent="  ")
    console.print(table)
