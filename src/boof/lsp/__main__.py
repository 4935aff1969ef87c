"""
Entry point for running the boof LSP server as a module.

Usage:
    python -m boof.lsp
    python -m boof.lsp --tcp --port 2087
"""

from boof.lsp.server import main

if __name__ == "__main__":
    main()
