"""Data models for LS-DYNA message file timing records."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class RunType(Enum):
    SMP = "smp"
    MPP = "mpp"
    UNKNOWN = ""


@dataclass
class Phase:
    """One row of the timing table. Child phases never own children."""

    name: str = ""
    cpu_seconds: float = 0.0
    cpu_percent: float = 0.0
    clock_seconds: float = 0.0
    clock_percent: float = 0.0
    children: list["Phase"] = field(default_factory=list)

    def add_child(
        self,
        name: str,
        cpu_seconds: float,
        cpu_percent: float,
        clock_seconds: float,
        clock_percent: float,
    ) -> "Phase":
        child = Phase(name, cpu_seconds, cpu_percent, clock_seconds, clock_percent)
        self.children.append(child)
        return child


@dataclass
class MessagRecord:
    """Everything extracted from a single messag / mesXXXX file."""

    file: str = ""
    version: str = ""
    date: str = ""
    revision: int = 0
    time: str = ""
    licensed_to: str = ""
    issued_by: str = ""
    platform: str = ""
    os_level: str = ""
    compiler: str = ""
    hostname: str = ""
    precision: str = ""
    svn_version: int = 0
    input_file: str = ""
    num_cpus: int = 0
    normal_termination: bool = False
    elapsed_time: float = 0.0
    run_type: RunType = RunType.UNKNOWN
    phases: list[Phase] = field(default_factory=list)

    def add_parent(
        self,
        name: str,
        cpu_seconds: float,
        cpu_percent: float,
        clock_seconds: float,
        clock_percent: float,
    ) -> int:
        """Append a top-level phase and return its index in ``phases``."""
        self.phases.append(Phase(name, cpu_seconds, cpu_percent, clock_seconds, clock_percent))
        return len(self.phases) - 1

    def add_child(
        self,
        parent_index: int,
        name: str,
        cpu_seconds: float,
        cpu_percent: float,
        clock_seconds: float,
        clock_percent: float,
    ) -> Phase:
        return self.phases[parent_index].add_child(
            name, cpu_seconds, cpu_percent, clock_seconds, clock_percent,
        )

    def find_phase(self, name: str) -> Optional[Phase]:
        """Look up a top-level phase by name, falling back to child phases."""
        for phase in self.phases:
            if phase.name == name:
                return phase
        for phase in self.phases:
            for child in phase.children:
                if child.name == name:
                    return child
        return None

    def total_clock_seconds(self) -> float:
        return sum(p.clock_seconds for p in self.phases)
