from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional


class Op(enum.Enum):
    MOVE_RIGHT = '>'
    MOVE_LEFT = '<'
    INCREMENT = '+'
    DECREMENT = '-'
    READ = ','
    PRINT = '.'
    LOOP_OPEN = '['
    LOOP_CLOSE = ']'

    @property
    def symbol(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False)
class InstructionSet:
    """
    Phrase table for one dialect.

    Binds each of the eight operations to exactly one two-word phrase.
    Recognition and dispatch both go through this table, so a new dialect
    is just a new instance.
    """

    name: str
    phrases: Mapping[str, Op]
    _by_op: Mapping[Op, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        table = dict(self.phrases)
        by_op: Dict[Op, str] = {}
        for phrase, op in table.items():
            if not isinstance(op, Op):
                raise ValueError(f"Phrase {phrase!r} is bound to {op!r}, not an Op")
            if len(phrase.split(' ')) != 2:
                raise ValueError(f"Phrase {phrase!r} must be exactly two space-separated words")
            if op in by_op:
                raise ValueError(f"Duplicate binding for {op.name}: {by_op[op]!r} and {phrase!r}")
            by_op[op] = phrase

        missing = [op.name for op in Op if op not in by_op]
        if missing:
            raise ValueError(f"Instruction set {self.name!r} has no phrase for: {', '.join(missing)}")

        object.__setattr__(self, 'phrases', MappingProxyType(table))
        object.__setattr__(self, '_by_op', MappingProxyType(by_op))

    def lookup(self, phrase: str) -> Optional[Op]:
        return self.phrases.get(phrase)

    def phrase_for(self, op: Op) -> str:
        return self._by_op[op]

    def encode(self, ops: Iterable[Op]) -> str:
        """Render a sequence of operations as program text."""
        return ' '.join(self._by_op[op] for op in ops)

    def encode_brainfuck(self, code: str) -> str:
        # Characters outside the eight symbols are comments and are dropped.
        symbols = {op.symbol: op for op in Op}
        return self.encode(symbols[ch] for ch in code if ch in symbols)


def _ook_style(word: str) -> Dict[str, Op]:
    return {
        f"{word}. {word}?": Op.MOVE_RIGHT,
        f"{word}? {word}.": Op.MOVE_LEFT,
        f"{word}. {word}.": Op.INCREMENT,
        f"{word}! {word}!": Op.DECREMENT,
        f"{word}. {word}!": Op.READ,
        f"{word}! {word}.": Op.PRINT,
        f"{word}! {word}?": Op.LOOP_OPEN,
        f"{word}? {word}!": Op.LOOP_CLOSE,
    }


OOK = InstructionSet('ook', _ook_style('Ook'))
BLUB = InstructionSet('blub', _ook_style('Blub'))

DIALECTS: Mapping[str, InstructionSet] = MappingProxyType({
    OOK.name: OOK,
    BLUB.name: BLUB,
})


def get_dialect(name: str) -> InstructionSet:
    try:
        return DIALECTS[name.lower()]
    except KeyError:
        known = ', '.join(sorted(DIALECTS))
        raise ValueError(f"Unknown dialect {name!r} (known: {known})") from None
