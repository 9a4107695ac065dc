
from .api import RunOptions, RunResult, load_string, run_file, run_string
from .errors import (
    OokError,
    OokInputError,
    OokRuntimeError,
    OokStepLimitError,
    OokSyntaxError,
    TapeUnderflowError,
)
from .instructions import BLUB, OOK, InstructionSet, Op, get_dialect
from .interpreter import OokInterpreter
from .lexer import tokenize
from .resolver import UNMATCHED, ResolvedProgram, resolve, resolve_source
from .tape import Tape

__all__ = [
    'OokInterpreter',
    'tokenize',
    'resolve',
    'resolve_source',
    'ResolvedProgram',
    'UNMATCHED',
    'Tape',
    'Op',
    'InstructionSet',
    'OOK',
    'BLUB',
    'get_dialect',
    'RunOptions',
    'RunResult',
    'load_string',
    'run_string',
    'run_file',
    'OokError',
    'OokSyntaxError',
    'OokRuntimeError',
    'OokInputError',
    'OokStepLimitError',
    'TapeUnderflowError',
]
