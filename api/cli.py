"""
EgoScript command line compiler.

    egoscript script.txt -o script.egs --disassemble
"""

import argparse
import sys
from typing import List, Optional

from .context import Context, default_script_path


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="egoscript", description="Compile an EgoScript AI script")
    ap.add_argument("source", help="script text file")
    ap.add_argument("-o", "--output", help="write the compiled instruction words to this file")
    ap.add_argument("-d", "--disassemble", action="store_true", help="print the disassembled instructions")
    ap.add_argument("--fallback", nargs="?", const=str(default_script_path()), default=None,
                    help="compile this script instead if SOURCE fails (default script if no path given)")
    ap.add_argument("--max-instructions", type=int, help="size of the instruction buffer in words")
    ap.add_argument("-v", "--verbose", action="store_true", help="print compile statistics")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    options = {}
    if args.max_instructions is not None:
        options["max_instructions"] = args.max_instructions
    ctx = Context(**options)

    try:
        script = ctx.load_script(args.source, fallback=args.fallback)
    except OSError as e:
        print(f"egoscript: cannot read {e.filename or args.source}: {e.strerror}", file=sys.stderr)
        return 2

    if script.fallback_reason:
        if script.fallback_from is not None:
            for diagnostic in script.fallback_from.diagnostics:
                print(diagnostic, file=sys.stderr)
        print(f"egoscript: {script.fallback_reason}, using {script.filename} instead", file=sys.stderr)

    for diagnostic in script.diagnostics:
        print(diagnostic, file=sys.stderr)

    if args.verbose:
        print(f"{script.filename}: {len(script.info)} words, "
              f"{len(script.diagnostics.errors)} error(s), {len(script.diagnostics.warnings)} warning(s)")

    if args.disassemble:
        print(script.disassemble())

    if not script.ok:
        return 1

    if args.output:
        script.save(args.output)
        if args.verbose:
            print(f"Wrote {len(script.info)} words to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
