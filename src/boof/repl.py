"""
Boof Interactive REPL (Read-Eval-Print Loop).

Every line is lexed, parsed and evaluated on its own; nothing but the
input history carries over from one line to the next.

Usage:
    boof
    boof repl

Example session:
    > 1 + 2 * 3
    Number(7.0)

    > :ast (1 + 2) * 3
    (* (group (+ Number(1.0) Number(2.0))) Number(3.0))

    > "a" + 1
    Nil
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

try:
    import readline

    HAS_READLINE = True
except ImportError:
    # readline not available on some platforms (e.g., Windows without pyreadline)
    HAS_READLINE = False

from boof import __version__
from boof.compiler import evaluate_source
from boof.compiler.lexer import Lexer
from boof.compiler.parser import Parser
from boof.compiler.printer import AstPrinter
from boof.compiler.tokens import KEYWORDS, TokenType
from boof.utils.errors import BoofError


HISTORY_FILE = Path.home() / ".boof_history"


# =============================================================================
# ANSI Color Codes
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors."""
        for attr in ["RED", "GREEN", "YELLOW", "CYAN", "BOLD", "DIM", "RESET"]:
            setattr(cls, attr, "")


def _init_colors() -> None:
    """Initialize colors based on terminal capabilities."""
    if not sys.stdout.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()


_init_colors()


# =============================================================================
# REPL Commands
# =============================================================================


@dataclass
class REPLCommand:
    """A REPL command definition."""

    name: str
    handler: Callable[[str], str]
    aliases: tuple[str, ...] = ()
    help_text: str = ""


# =============================================================================
# REPL Session
# =============================================================================


class REPLSession:
    """
    Interactive REPL session for boof.

    Args:
        lenient_eof: Passed to the parser for every evaluated line
    """

    def __init__(self, lenient_eof: bool = False) -> None:
        self.lenient_eof = lenient_eof
        self.history: list[str] = []
        self.running = True

        self._commands = self._setup_commands()

        self.prompt = "> "

    def _setup_commands(self) -> dict[str, REPLCommand]:
        """Setup REPL commands."""
        commands = [
            REPLCommand(
                name="help",
                aliases=("h", "?"),
                help_text="Show this help message",
                handler=self._cmd_help,
            ),
            REPLCommand(
                name="quit",
                aliases=("q", "exit"),
                help_text="Exit the REPL",
                handler=self._cmd_quit,
            ),
            REPLCommand(
                name="ast",
                help_text="Show the tree of an expression",
                handler=self._cmd_ast,
            ),
            REPLCommand(
                name="tokens",
                aliases=("tok",),
                help_text="Show the tokens of an expression",
                handler=self._cmd_tokens,
            ),
            REPLCommand(
                name="history",
                help_text="Show the lines entered so far",
                handler=self._cmd_history,
            ),
        ]

        # Build alias lookup
        alias_map = {}
        for cmd in commands:
            alias_map[cmd.name] = cmd
            for alias in cmd.aliases:
                alias_map[alias] = cmd

        return alias_map

    # -------------------------------------------------------------------------
    # Command Handlers
    # -------------------------------------------------------------------------

    def _cmd_help(self, args: str) -> str:
        """Show help message."""
        lines = [
            f"{Colors.BOLD}Commands:{Colors.RESET}",
            f"  {Colors.CYAN}:help{Colors.RESET}           Show this help",
            f"  {Colors.CYAN}:quit, :q{Colors.RESET}       Exit REPL",
            f"  {Colors.CYAN}:ast <expr>{Colors.RESET}     Show the tree of an expression",
            f"  {Colors.CYAN}:tokens <expr>{Colors.RESET}  Show the tokens of an expression",
            f"  {Colors.CYAN}:history{Colors.RESET}        Show the lines entered so far",
            "",
            f"{Colors.BOLD}Expressions:{Colors.RESET}",
            f"  {Colors.GREEN}1 + 2 * 3{Colors.RESET}           Arithmetic on numbers",
            f'  {Colors.GREEN}"boo" + "f"{Colors.RESET}         String concatenation',
            f"  {Colors.GREEN}!(1 < 2) == false{Colors.RESET}   Comparison and logic",
            "",
            f"{Colors.BOLD}Values:{Colors.RESET}",
            "  numbers, strings, true, false, nil",
        ]
        return "\n".join(lines)

    def _cmd_quit(self, args: str) -> str:
        """Exit the REPL."""
        self.running = False
        return f"{Colors.DIM}Goodbye!{Colors.RESET}"

    def _cmd_ast(self, args: str) -> str:
        """Show the printed tree of an expression."""
        if not args.strip():
            return f"{Colors.RED}Error: :ast requires an expression{Colors.RESET}"

        tokens = Lexer(args).tokenize()
        expr = Parser(tokens, lenient_eof=self.lenient_eof).parse()
        return AstPrinter().print(expr)

    def _cmd_tokens(self, args: str) -> str:
        """Show the token stream of an expression."""
        if not args.strip():
            return f"{Colors.RED}Error: :tokens requires an expression{Colors.RESET}"

        tokens = Lexer(args).tokenize()
        return "\n".join(
            f"  {token!r}" for token in tokens if token.type != TokenType.EOF
        )

    def _cmd_history(self, args: str) -> str:
        """Show the input history."""
        if not self.history:
            return f"{Colors.DIM}No history{Colors.RESET}"
        return "\n".join(f"  {i}: {line}" for i, line in enumerate(self.history, 1))

    # -------------------------------------------------------------------------
    # Evaluation
    # -------------------------------------------------------------------------

    def eval_line(self, line: str) -> Optional[str]:
        """
        Evaluate a single line of input.

        Returns the result string or None if no output. Lexical and
        syntax errors are reported in the result and do not end the
        session.
        """
        line = line.strip()
        if not line:
            return None

        try:
            if line.startswith(":"):
                return self._handle_command(line)
            result = evaluate_source(line, lenient_eof=self.lenient_eof)
        except BoofError as e:
            return f"{Colors.RED}{e}{Colors.RESET}"

        return repr(result.value)

    def _handle_command(self, cmd: str) -> str:
        """Handle a REPL command."""
        parts = cmd[1:].split(maxsplit=1)
        command_name = parts[0].lower() if parts else ""
        args = parts[1] if len(parts) > 1 else ""

        if command_name in self._commands:
            return self._commands[command_name].handler(args)

        return f"{Colors.RED}Unknown command: :{command_name}{Colors.RESET}\nType :help for available commands"

    # -------------------------------------------------------------------------
    # Main Loop
    # -------------------------------------------------------------------------

    def run(self) -> None:
        """Main REPL loop; returns on :quit or end of input."""
        print(f"{Colors.BOLD}boof {__version__}{Colors.RESET} - Interactive Mode")
        print(
            f"Type {Colors.CYAN}:help{Colors.RESET} for help, {Colors.CYAN}:quit{Colors.RESET} to exit"
        )

        if HAS_READLINE:
            completer = REPLCompleter(self)
            readline.set_completer(completer.complete)
            readline.parse_and_bind("tab: complete")
            try:
                if HISTORY_FILE.exists():
                    readline.read_history_file(str(HISTORY_FILE))
            except OSError:
                pass

        try:
            while self.running:
                try:
                    line = input(self.prompt)
                except KeyboardInterrupt:
                    print(f"\n{Colors.DIM}Use :quit to exit{Colors.RESET}")
                    continue
                except EOFError:
                    print()
                    break

                if line.strip():
                    self.history.append(line)

                result = self.eval_line(line)
                if result:
                    print(result)
        finally:
            if HAS_READLINE:
                try:
                    readline.set_history_length(1000)
                    readline.write_history_file(str(HISTORY_FILE))
                except OSError:
                    pass


# =============================================================================
# Tab Completion
# =============================================================================


class REPLCompleter:
    """Tab completion for the REPL."""

    def __init__(self, session: REPLSession) -> None:
        self.session = session
        self.keywords = sorted(KEYWORDS)
        self.commands = sorted(f":{name}" for name in session._commands)
        self._completions: list[str] = []

    def complete(self, text: str, state: int) -> Optional[str]:
        """Get completions for the given text."""
        if state == 0:
            self._completions = self._get_completions(text)
        try:
            return self._completions[state]
        except IndexError:
            return None

    def _get_completions(self, text: str) -> list[str]:
        """Get all completions for the given text prefix."""
        if text.startswith(":"):
            return [c for c in self.commands if c.startswith(text)]
        return [kw for kw in self.keywords if kw.startswith(text)]


# =============================================================================
# Entry Point
# =============================================================================


def main(lenient_eof: bool = False) -> int:
    """Entry point for the REPL."""
    session = REPLSession(lenient_eof=lenient_eof)
    session.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
