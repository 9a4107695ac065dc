import argparse
import sys

from pathlib import Path
from typing import List, Optional

from .api import RunOptions, load_string
from .errors import OokError
from .instructions import DIALECTS, get_dialect
from .interpreter import OokInterpreter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ook",
        description="Run an Ook! program.",
    )
    parser.add_argument("file", nargs="?", help="Program source file")
    parser.add_argument("--dialect", default="ook", choices=sorted(DIALECTS), help="Phrase table (default ook)")
    parser.add_argument("--strict", action="store_true", help="Reject unmatched loop brackets before running")
    parser.add_argument("--normalize-whitespace", action="store_true",
                        help="Treat newlines and repeated spaces as single word separators")
    parser.add_argument("--max-steps", type=int, default=None, help="Abort after this many instructions")
    parser.add_argument("--trace", action="store_true", help="Print an execution trace to stderr")
    parser.add_argument("--encoding", default="utf-8", help="Source file encoding (default utf-8)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.file is None:
        parser.print_usage(sys.stdout)
        print("You must supply a filename")
        return 1

    try:
        source = Path(args.file).read_text(encoding=args.encoding)
    except OSError as e:
        print(e, file=sys.stderr)
        return e.errno or 1
    except UnicodeDecodeError as e:
        print(f"{args.file}: {e}", file=sys.stderr)
        return 1

    options = RunOptions(
        instruction_set=get_dialect(args.dialect),
        strict=args.strict,
        normalize_whitespace=args.normalize_whitespace,
        max_steps=args.max_steps,
        trace=args.trace,
    )

    interpreter = None
    try:
        resolved = load_string(source, options=options)
        interpreter = OokInterpreter(
            resolved,
            instruction_set=options.instruction_set,
            max_steps=options.max_steps,
            trace=options.trace,
        )
        interpreter.run()
    except OokError as e:
        sys.stdout.flush()
        print(f"\n{e}", file=sys.stderr)
        return 1
    finally:
        if interpreter is not None and options.trace:
            sys.stderr.write("\n".join(interpreter.state.trace) + "\n")

    return 0

