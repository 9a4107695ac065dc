from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .tape import Tape


@dataclass
class MachineState:
    pc: int = 0
    steps: int = 0
    tape: Tape = field(default_factory=Tape)
    output: List[str] = field(default_factory=list)
    input_reads: int = 0
    trace: List[str] = field(default_factory=list)
    is_tracing: bool = False

    def reset(self, *, is_tracing: bool = False) -> None:
        self.pc = 0
        self.steps = 0
        self.tape = Tape()
        self.output.clear()
        self.input_reads = 0
        self.trace.clear()
        self.is_tracing = is_tracing

    def add_trace(self, message: str) -> None:
        if self.is_tracing:
            self.trace.append(message)
