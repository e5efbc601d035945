#!/usr/bin/env python3
import argparse
import logging
import sys
from pathlib import Path

from rich.logging import RichHandler

from .core.pipeline import CompilerConfig, ToyCompiler
from .utils.colors import set_minimal
from .utils import term


def setup_logging(verbosity: int):
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logger = logging.getLogger("toyc")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=term.err_console, show_path=False))


def write_output(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding='utf-8')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='toyc', description='Compile toy assignment programs to stack-machine code')
    source = parser.add_mutually_exclusive_group()
    source.add_argument('input', nargs='?', help='Source file (reads stdin when omitted)')
    source.add_argument('-e', '--source', help='Compile SOURCE given on the command line')
    parser.add_argument('-o', '--output', help='Write machine code to this file instead of stdout')
    parser.add_argument('--tokens', action='store_true', help='Show the token stream')
    parser.add_argument('--ast', action='store_true', help='Show the parsed statements')
    parser.add_argument('--symbols', action='store_true', help='Show the symbol table')
    parser.add_argument('--ir', action='store_true', help='Show the intermediate code')
    parser.add_argument('--strict', action='store_true', help='Stop at the first stage that reports errors')
    parser.add_argument('-W', '--warnings-as-errors', action='store_true',
                        help='Treat unrecognized characters as errors')
    parser.add_argument('--minimal', action='store_true', help='Compact, uncolored output')
    parser.add_argument('-v', '--verbose', action='count', default=0)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    config = CompilerConfig.from_env()
    config.verbose = args.verbose > 0
    config.strict = config.strict or args.strict
    config.warnings_as_errors = config.warnings_as_errors or args.warnings_as_errors
    config.minimal_ui = config.minimal_ui or args.minimal
    if config.minimal_ui:
        set_minimal(True)

    if args.source is not None:
        source, filename = args.source, "<command-line>"
    elif args.input:
        input_path = Path(args.input)
        if not input_path.exists():
            term.print_error(f"File not found: {input_path}")
            return 2
        if not input_path.is_file():
            term.print_error(f"Not a file: {input_path}")
            return 2
        source, filename = input_path.read_text(encoding='utf-8'), str(input_path)
    else:
        source, filename = sys.stdin.read(), "<stdin>"

    on_stage = term.print_stage if config.verbose else None
    result = ToyCompiler(config, on_stage=on_stage).compile(source, filename)

    if args.tokens:
        term.console.print(term.render_tokens(result.tokens))
    if args.ast:
        term.console.print(term.render_ast(result.statements))
    if args.symbols:
        term.console.print(term.render_symbols(result.symbols))
    if args.ir:
        term.console.print(term.render_ir(result.ir))

    if config.minimal_ui:
        result.diagnostics.print_all(with_colors=False)
    else:
        term.print_diagnostics(result.diagnostics.diagnostics)

    if result.machine_code is None:
        term.print_error(f"Compilation stopped after {result.halted_after}")
        return 1

    if args.output:
        out_path = Path(args.output)
        write_output(out_path, result.machine_code)
        term.print_success(f"Wrote {len(result.ir)} instructions to {out_path}")
    else:
        sys.stdout.write(result.machine_code)
        sys.stdout.flush()

    return 0 if result.ok else 1


if __name__ == '__main__':
    sys.exit(main())
