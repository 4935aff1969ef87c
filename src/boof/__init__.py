"""
Boof - a small dynamically-typed expression language.

Boof provides a lexer, a recursive descent parser and a tree-walking
evaluator for single expressions over numbers, strings, booleans and nil,
together with a command-line runner, an interactive prompt and a
language server.
"""

from boof.compiler import evaluate_file, evaluate_source, run_source
from boof.compiler.interpreter import Interpreter
from boof.compiler.lexer import Lexer
from boof.compiler.parser import Parser
from boof.compiler.printer import AstPrinter

__version__ = "0.1.0"
__all__ = [
    "run_source",
    "evaluate_source",
    "evaluate_file",
    "Lexer",
    "Parser",
    "Interpreter",
    "AstPrinter",
]
