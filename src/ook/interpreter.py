import re
import sys

from typing import Callable, Dict, List, Optional, TextIO

from .errors import (
    make_input_error,
    make_runtime_error,
    make_step_limit_error,
    make_underflow_error,
)
from .instructions import OOK, InstructionSet, Op
from .resolver import UNMATCHED, ResolvedProgram
from .state import MachineState
from .tape import INT64_MAX, INT64_MIN

_INTEGER = re.compile(r'[+-]?[0-9]+')


class OokInterpreter:
    """
    Ook! tape machine

    Runs a resolved program against a fresh tape.

    Execution model:
    - pc starts at 0 and the run halts once pc falls off the end
    - After every instruction pc advances by one, jumps included, so a jump
      to a bracket resumes at the instruction after it
    - The read instruction consumes the whole input stream and parses it as
      one base-10 integer; a second read finds the stream exhausted
    - Print writes the low 8 bits of the current cell as one character
    """

    def __init__(self, resolved: ResolvedProgram, *, instruction_set: InstructionSet = OOK,
                 max_steps: Optional[int] = None, trace: bool = False):
        self.resolved = resolved
        self.instruction_set = instruction_set
        self.max_steps = max_steps
        self.trace = trace
        self.state = MachineState(is_tracing=trace)
        self.stdin: TextIO = sys.stdin
        self.stdout: TextIO = sys.stdout

        self._handlers: Dict[Op, Callable[[], None]] = {
            Op.MOVE_RIGHT: self._move_right,
            Op.MOVE_LEFT: self._move_left,
            Op.INCREMENT: self._increment,
            Op.DECREMENT: self._decrement,
            Op.READ: self._read,
            Op.PRINT: self._print,
            Op.LOOP_OPEN: self._loop_open,
            Op.LOOP_CLOSE: self._loop_close,
        }

    # ===== Main Loop =====

    def run(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> str:
        """
        Execute the program from the start.

        Args:
            stdin: stream consumed by read instructions (defaults to sys.stdin)
            stdout: stream receiving printed characters (defaults to sys.stdout)

        Returns:
            Everything printed during the run
        """
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout
        self.state.reset(is_tracing=self.trace)

        program = self.resolved.program
        state = self.state
        while state.pc < len(program):
            if self.max_steps is not None and state.steps >= self.max_steps:
                raise make_step_limit_error(max_steps=self.max_steps, listing=self._listing(), pc=state.pc)

            op = program[state.pc]
            if state.is_tracing:
                state.add_trace(self._trace_line(op))

            try:
                self._handlers[op]()
            except IndexError as e:
                raise make_underflow_error(
                    position=state.tape.position,
                    listing=self._listing(),
                    pc=state.pc,
                ) from e

            state.pc += 1
            state.steps += 1

        return ''.join(state.output)

    # ===== Tape Operations =====

    def _move_right(self):
        self.state.tape.move_right()

    def _move_left(self):
        self.state.tape.move_left()

    def _increment(self):
        self.state.tape.increment()

    def _decrement(self):
        self.state.tape.decrement()

    # ===== I/O =====

    def _read(self):
        state = self.state
        # Validate the position before blocking on input.
        state.tape.read()

        text = self.stdin.read()
        state.input_reads += 1
        stripped = text.strip()
        if not stripped:
            message = 'input exhausted' if state.input_reads > 1 else 'empty input, expected an integer'
            raise make_input_error(message=message, text=text, listing=self._listing(), pc=state.pc)
        if not _INTEGER.fullmatch(stripped):
            raise make_input_error(
                message=f"invalid integer {stripped!r}",
                text=text,
                listing=self._listing(),
                pc=state.pc,
            )

        value = int(stripped)
        if not INT64_MIN <= value <= INT64_MAX:
            raise make_input_error(
                message=f"integer {stripped} does not fit in a 64-bit cell",
                text=text,
                listing=self._listing(),
                pc=state.pc,
            )
        state.tape.write(value)

    def _print(self):
        ch = chr(self.state.tape.read() & 0xFF)
        self.state.output.append(ch)
        self.stdout.write(ch)
        self.stdout.flush()

    # ===== Control Flow =====

    def _jump(self):
        pc = self.state.pc
        partner = self.resolved.partner(pc)
        if partner == UNMATCHED:
            raise make_runtime_error(
                message=f"{self.resolved.program[pc].name.lower().replace('_', '-')} at pc {pc} has no matching bracket",
                listing=self._listing(),
                pc=pc,
            )
        self.state.pc = partner

    def _loop_open(self):
        if self.state.tape.read() == 0:
            self._jump()

    def _loop_close(self):
        if self.state.tape.read() != 0:
            self._jump()

    # ===== Diagnostics =====

    def _listing(self) -> List[str]:
        return self.resolved.listing(self.instruction_set)

    def _trace_line(self, op: Op) -> str:
        tape = self.state.tape
        cell = tape.read() if tape.position >= 0 else None
        return (
            f"step={self.state.steps} pc={self.state.pc} op={op.name} "
            f"pos={tape.position} cell={cell}"
        )
