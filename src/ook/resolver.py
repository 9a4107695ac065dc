from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from .errors import make_syntax_error
from .instructions import OOK, InstructionSet, Op
from .lexer import tokenize

UNMATCHED = -1


@dataclass(frozen=True, eq=False)
class ResolvedProgram:
    program: Tuple[Op, ...]
    jumps: np.ndarray  # int64, partner index per slot or UNMATCHED
    unmatched_opens: Tuple[int, ...] = ()
    unmatched_closes: Tuple[int, ...] = ()

    def __len__(self) -> int:
        return len(self.program)

    def partner(self, pc: int) -> int:
        return int(self.jumps[pc])

    def listing(self, instruction_set: InstructionSet = OOK) -> List[str]:
        return [f"{instruction_set.phrase_for(op)}  ({op.symbol})" for op in self.program]


def resolve(phrases: Sequence[str], instruction_set: InstructionSet = OOK, *, strict: bool = False) -> ResolvedProgram:
    """
    Filter phrases down to instructions and pair up the loop brackets.

    Unrecognized phrases are dropped and take no program slot. A loop-close
    with nothing open is paired with index 0 unless strict is set, in which
    case it raises. Loop-opens left over at the end stay UNMATCHED (strict
    mode raises for those too).
    """
    program: List[Op] = []
    source_index: List[int] = []
    pairs: List[Tuple[int, int]] = []
    open_stack: List[int] = []
    unmatched_closes: List[int] = []

    for i, phrase in enumerate(phrases):
        op = instruction_set.lookup(phrase)
        if op is None:
            continue

        pc = len(program)
        program.append(op)
        source_index.append(i)

        if op is Op.LOOP_OPEN:
            open_stack.append(pc)
        elif op is Op.LOOP_CLOSE:
            if open_stack:
                left = open_stack.pop()
            else:
                if strict:
                    raise make_syntax_error(
                        message='unmatched loop-close',
                        phrases=phrases,
                        index=i,
                    )
                unmatched_closes.append(pc)
                left = 0
            pairs.append((left, pc))

    if open_stack and strict:
        raise make_syntax_error(
            message='unmatched loop-open',
            phrases=phrases,
            index=source_index[open_stack[0]],
        )

    jumps = np.full(len(program), UNMATCHED, dtype=np.int64)
    for left, right in pairs:
        jumps[left] = right
        jumps[right] = left
    jumps.flags.writeable = False

    return ResolvedProgram(
        program=tuple(program),
        jumps=jumps,
        unmatched_opens=tuple(open_stack),
        unmatched_closes=tuple(unmatched_closes),
    )


def resolve_source(text: str, instruction_set: InstructionSet = OOK, *, strict: bool = False,
                   normalize_whitespace: bool = False) -> ResolvedProgram:
    phrases = tokenize(text, normalize_whitespace=normalize_whitespace)
    return resolve(phrases, instruction_set, strict=strict)
