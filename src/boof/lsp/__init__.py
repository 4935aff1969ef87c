"""
Boof Language Server Protocol (LSP) Package.

Editor support for boof documents: diagnostics for the first lexical or
syntax error, and hover showing the parsed tree and value.
"""

from boof.lsp.diagnostics import DiagnosticProvider, get_diagnostics_for_document
from boof.lsp.hover import get_hover_for_document

__all__ = [
    "DiagnosticProvider",
    "get_diagnostics_for_document",
    "get_hover_for_document",
]
