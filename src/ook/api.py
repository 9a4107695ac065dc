from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, TextIO, Tuple

from .instructions import OOK, InstructionSet
from .interpreter import OokInterpreter
from .resolver import ResolvedProgram, resolve_source


@dataclass(frozen=True)
class RunOptions:
    instruction_set: InstructionSet = OOK
    strict: bool = False
    normalize_whitespace: bool = False
    max_steps: Optional[int] = None
    trace: bool = False


@dataclass(frozen=True)
class RunResult:
    output: str
    steps: int
    tape: List[int]
    position: int
    instruction_count: int
    trace: Tuple[str, ...] = field(default=())


def load_string(source: str, *, options: Optional[RunOptions] = None) -> ResolvedProgram:
    opts = RunOptions() if options is None else options
    return resolve_source(
        source,
        opts.instruction_set,
        strict=opts.strict,
        normalize_whitespace=opts.normalize_whitespace,
    )


def run_string(source: str, *, options: Optional[RunOptions] = None,
               stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> RunResult:
    opts = RunOptions() if options is None else options
    resolved = load_string(source, options=opts)
    interpreter = OokInterpreter(
        resolved,
        instruction_set=opts.instruction_set,
        max_steps=opts.max_steps,
        trace=opts.trace,
    )
    output = interpreter.run(stdin=stdin, stdout=stdout)
    state = interpreter.state
    return RunResult(
        output=output,
        steps=state.steps,
        tape=state.tape.snapshot(),
        position=state.tape.position,
        instruction_count=len(resolved),
        trace=tuple(state.trace),
    )


def run_file(path: str | Path, *, options: Optional[RunOptions] = None, encoding: str = "utf-8",
             stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> RunResult:
    p = Path(path)
    return run_string(p.read_text(encoding=encoding), options=options, stdin=stdin, stdout=stdout)
