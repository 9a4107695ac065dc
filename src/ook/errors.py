from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence


def _build_context(items: Sequence[str], index: int, *, context: int = 3) -> str:
    if not items:
        return ''
    idx = min(max(0, index), len(items) - 1)
    start = max(0, idx - context)
    end = min(len(items) - 1, idx + context)

    out = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:5d} | {items[i]}")
    return "\n".join(out)


def _hint_for(message: str, *, kind: str) -> Optional[str]:
    msg = message.lower()
    if kind == 'syntax':
        if 'unmatched loop-close' in msg:
            return 'Every "Ook? Ook!" needs an earlier "Ook! Ook?" to jump back to.'
        if 'unmatched loop-open' in msg:
            return 'Add the closing "Ook? Ook!" or check for a mistyped phrase in the loop body.'
        return None
    if kind == 'runtime':
        if 'left of cell 0' in msg:
            return 'The tape only grows to the right. Check the balance of "Ook? Ook." moves.'
        if 'no matching' in msg:
            return 'Run with --strict to report unbalanced loops before execution starts.'
        if 'step limit' in msg:
            return 'The program may be stuck in a loop. Raise --max-steps if it is just slow.'
        return None
    if kind == 'input':
        if 'exhausted' in msg:
            return 'Input is read in full by the first read instruction; later reads find nothing.'
        return 'Input must be a single base-10 integer, e.g. "42" or "-7".'
    return None


@dataclass
class OokError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class OokSyntaxError(OokError):
    index: int
    context: str


@dataclass
class OokRuntimeError(OokError):
    pc: int
    context: str


@dataclass
class TapeUnderflowError(OokRuntimeError):
    position: int


@dataclass
class OokInputError(OokRuntimeError):
    text: str


@dataclass
class OokStepLimitError(OokRuntimeError):
    max_steps: int


def _with_hint(text: str, kind: str, message: str) -> str:
    hint = _hint_for(message, kind=kind)
    hint_block = f"\nHint: {hint}" if hint else ""
    return f"{text}{hint_block}"


def make_syntax_error(*, message: str, phrases: Sequence[str], index: int) -> OokSyntaxError:
    ctx = _build_context(phrases, index)
    body = f"SyntaxError: {message} (phrase {index})\n{ctx}"
    return OokSyntaxError(
        message=_with_hint(body, 'syntax', message),
        index=index,
        context=ctx,
    )


def _runtime_body(kind_name: str, message: str, listing: Sequence[str], pc: int):
    ctx = _build_context(listing, pc)
    return f"{kind_name}: {message} (pc {pc})\n{ctx}", ctx


def make_runtime_error(*, message: str, listing: Sequence[str], pc: int) -> OokRuntimeError:
    body, ctx = _runtime_body('RuntimeError', message, listing, pc)
    return OokRuntimeError(message=_with_hint(body, 'runtime', message), pc=pc, context=ctx)


def make_underflow_error(*, position: int, listing: Sequence[str], pc: int) -> TapeUnderflowError:
    message = f"tape access at position {position}, left of cell 0"
    body, ctx = _runtime_body('RuntimeError', message, listing, pc)
    return TapeUnderflowError(
        message=_with_hint(body, 'runtime', message),
        pc=pc,
        context=ctx,
        position=position,
    )


def make_input_error(*, message: str, text: str, listing: Sequence[str], pc: int) -> OokInputError:
    body, ctx = _runtime_body('InputError', message, listing, pc)
    return OokInputError(message=_with_hint(body, 'input', message), pc=pc, context=ctx, text=text)


def make_step_limit_error(*, max_steps: int, listing: Sequence[str], pc: int) -> OokStepLimitError:
    message = f"step limit of {max_steps} exceeded"
    body, ctx = _runtime_body('RuntimeError', message, listing, pc)
    return OokStepLimitError(
        message=_with_hint(body, 'runtime', message),
        pc=pc,
        context=ctx,
        max_steps=max_steps,
    )
