"""
Boof Command-Line Interface.

Provides commands to evaluate, check and inspect boof programs.

Usage:
    boof                            # Interactive mode
    boof input.boof                 # Same as: boof run input.boof
    boof run input.boof             # Evaluate a script and print its value
    boof run input.boof --ast       # Print the parsed tree instead
    boof eval "1 + 2 * 3"           # Evaluate an inline expression
    boof check input.boof           # Lex and parse only
    boof tokens input.boof          # Show the token stream
    boof ast input.boof             # Show the parsed tree
    boof repl                       # Interactive mode

Exit status is 0 on success, 1 when the script cannot be read or contains
a lexical or syntax error, and 64 on bad usage. A syntax error exits with
1, the same status as a lexical error.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

from boof import __version__
from boof.compiler import evaluate_source, read_source
from boof.compiler.lexer import Lexer
from boof.compiler.parser import Parser
from boof.compiler.printer import AstPrinter
from boof.compiler.tokens import TokenType
from boof.repl import Colors
from boof.repl import main as repl_main
from boof.utils.errors import BoofError, UsageError

logger = logging.getLogger("boof")


class BoofArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad usage as a UsageError (exit 64)."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(f"{self.format_usage().rstrip()}\n{self.prog}: error: {message}")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = BoofArgumentParser(
        prog="boof",
        description="boof - a small expression language",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log pipeline details to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Run command
    run_parser = subparsers.add_parser(
        "run",
        aliases=["r"],
        help="Evaluate a boof script and print its value",
    )
    run_parser.add_argument(
        "input",
        type=Path,
        help="Input boof script",
    )
    _add_pipeline_options(run_parser)

    # Eval command
    eval_parser = subparsers.add_parser(
        "eval",
        aliases=["e"],
        help="Evaluate an inline expression and print its value",
    )
    eval_parser.add_argument(
        "expression",
        help="boof expression text",
    )
    _add_pipeline_options(eval_parser)

    # Check command (syntax validation)
    check_parser = subparsers.add_parser(
        "check",
        help="Check a boof script for lexical and syntax errors",
    )
    check_parser.add_argument("input", type=Path, help="Input boof script")
    check_parser.add_argument(
        "--lenient-eof",
        action="store_true",
        help="Accept a missing closing token at end of input",
    )

    # Tokens command
    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Show the token stream of a boof script",
    )
    tokens_parser.add_argument("input", type=Path, help="Input boof script")

    # AST command
    ast_parser = subparsers.add_parser(
        "ast",
        help="Show the parsed tree of a boof script",
    )
    ast_parser.add_argument("input", type=Path, help="Input boof script")
    ast_parser.add_argument(
        "--lenient-eof",
        action="store_true",
        help="Accept a missing closing token at end of input",
    )

    # REPL command
    repl_parser = subparsers.add_parser(
        "repl",
        aliases=["i"],
        help="Start the interactive prompt",
    )
    repl_parser.add_argument(
        "--lenient-eof",
        action="store_true",
        help="Accept a missing closing token at end of input",
    )

    return parser


def _add_pipeline_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--ast",
        action="store_true",
        help="Print the parsed tree instead of the value",
    )
    parser.add_argument(
        "--lenient-eof",
        action="store_true",
        help="Accept a missing closing token at end of input",
    )


def _report_error(error: BoofError) -> int:
    """Print an error to stderr and return its exit status."""
    print(f"{Colors.RED}{error}{Colors.RESET}", file=sys.stderr)
    return error.code


def _evaluate_and_print(source: str, filename: Optional[str], args: argparse.Namespace) -> int:
    result = evaluate_source(source, filename=filename, lenient_eof=args.lenient_eof)
    logger.debug("Scanned %d tokens", len(result.tokens))
    if args.ast:
        print(result.printed_ast)
    else:
        print(repr(result.value))
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    """Handle the run command."""
    try:
        source = read_source(args.input)
        logger.debug("Read %d characters from %s", len(source), args.input)
        return _evaluate_and_print(source, str(args.input), args)
    except BoofError as e:
        return _report_error(e)


def cmd_eval(args: argparse.Namespace) -> int:
    """Handle the eval command."""
    try:
        return _evaluate_and_print(args.expression, None, args)
    except BoofError as e:
        return _report_error(e)


def cmd_check(args: argparse.Namespace) -> int:
    """Handle the check command."""
    input_path: Path = args.input

    try:
        source = read_source(input_path)
        tokens = Lexer(source, str(input_path)).tokenize()
        Parser(tokens, lenient_eof=args.lenient_eof).parse()
    except BoofError as e:
        return _report_error(e)

    print(f"{Colors.GREEN}OK:{Colors.RESET} {input_path} (no syntax errors)")
    return 0


def cmd_tokens(args: argparse.Namespace) -> int:
    """Handle the tokens command."""
    input_path: Path = args.input

    try:
        source = read_source(input_path)
        tokens = Lexer(source, str(input_path)).tokenize()
    except BoofError as e:
        return _report_error(e)

    for token in tokens:
        if token.type == TokenType.EOF:
            continue
        print(f"{token.line:4d}  {token.type.name:<14} {token.lexeme}")
    return 0


def cmd_ast(args: argparse.Namespace) -> int:
    """Handle the ast command."""
    input_path: Path = args.input

    try:
        source = read_source(input_path)
        tokens = Lexer(source, str(input_path)).tokenize()
        expr = Parser(tokens, lenient_eof=args.lenient_eof).parse()
    except BoofError as e:
        return _report_error(e)

    print(AstPrinter().print(expr))
    return 0


def cmd_repl(args: argparse.Namespace) -> int:
    """Handle the repl command."""
    return repl_main(lenient_eof=getattr(args, "lenient_eof", False))


COMMAND_HANDLERS = {
    "run": cmd_run,
    "r": cmd_run,
    "eval": cmd_eval,
    "e": cmd_eval,
    "check": cmd_check,
    "tokens": cmd_tokens,
    "ast": cmd_ast,
    "repl": cmd_repl,
    "i": cmd_repl,
}


def _expand_script_shorthand(argv: list[str]) -> list[str]:
    """Rewrite `boof SCRIPT ...` as `boof run SCRIPT ...`."""
    if argv and not argv[0].startswith("-") and argv[0] not in COMMAND_HANDLERS:
        return ["run", *argv]
    return argv


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    try:
        args = parser.parse_args(_expand_script_shorthand(argv))
    except UsageError as e:
        return _report_error(e)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

    if args.command is None:
        return cmd_repl(args)

    handler = COMMAND_HANDLERS.get(args.command)
    if handler:
        logger.debug("Running command %s", args.command)
        return handler(args)

    return _report_error(UsageError())


if __name__ == "__main__":
    sys.exit(main())
