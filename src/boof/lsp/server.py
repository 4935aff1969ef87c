"""
Boof Language Server Protocol (LSP) Server.

This module implements an LSP server for the boof language using pygls
(Python Language Server). It provides:

- Document synchronization (open, change, save, close)
- Diagnostics (the first lexical or syntax error of a document)
- Hover information (parsed tree and value)

Usage:
    # Start the server in stdio mode (for IDE integration)
    boof-lsp

    # Start in TCP mode (for debugging)
    boof-lsp --tcp --port 2087
"""

import argparse
import logging
from typing import Optional

from lsprotocol import types
from pygls.lsp.server import LanguageServer

from boof import __version__
from boof.lsp.diagnostics import get_diagnostics_for_document
from boof.lsp.hover import get_hover_for_document

logger = logging.getLogger("boof-lsp")


class BoofLanguageServer(LanguageServer):
    """
    Language Server Protocol implementation for boof.

    Documents are re-checked from scratch on every change; the server
    keeps no per-document state beyond pygls' workspace.
    """

    def __init__(self, lenient_eof: bool = False) -> None:
        """Initialize the boof language server."""
        super().__init__(
            name="boof-lsp",
            version=f"v{__version__}",
        )
        self.lenient_eof = lenient_eof

        self._register_handlers()

    def _register_handlers(self) -> None:
        """
        Register all LSP request and notification handlers.

        pygls tags each handler with attributes, which bound methods do not
        accept, so every feature is registered as a plain function that
        forwards to the matching method.
        """

        # Document synchronization
        @self.feature(types.TEXT_DOCUMENT_DID_OPEN)
        def did_open(params: types.DidOpenTextDocumentParams) -> None:
            self._on_did_open(params)

        @self.feature(types.TEXT_DOCUMENT_DID_CHANGE)
        def did_change(params: types.DidChangeTextDocumentParams) -> None:
            self._on_did_change(params)

        @self.feature(types.TEXT_DOCUMENT_DID_SAVE)
        def did_save(params: types.DidSaveTextDocumentParams) -> None:
            self._on_did_save(params)

        @self.feature(types.TEXT_DOCUMENT_DID_CLOSE)
        def did_close(params: types.DidCloseTextDocumentParams) -> None:
            self._on_did_close(params)

        # Hover
        @self.feature(types.TEXT_DOCUMENT_HOVER)
        def hover(params: types.HoverParams) -> Optional[types.Hover]:
            return self._on_hover(params)

    def _check_document(self, uri: str, text: str) -> None:
        """Run the front end over a document and publish the result."""
        diagnostics = get_diagnostics_for_document(text, uri, lenient_eof=self.lenient_eof)
        self._publish_diagnostics(uri, diagnostics)

    def _publish_diagnostics(self, uri: str, diagnostics: list[types.Diagnostic]) -> None:
        """Publish diagnostics to the client."""
        self.text_document_publish_diagnostics(
            types.PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
        )

    # =========================================================================
    # Document Synchronization
    # =========================================================================

    def _on_did_open(self, params: types.DidOpenTextDocumentParams) -> None:
        """Handle document open notification."""
        document = params.text_document
        logger.info("Document opened: %s", document.uri)

        self._check_document(document.uri, document.text)

    def _on_did_change(self, params: types.DidChangeTextDocumentParams) -> None:
        """Handle document change notification."""
        uri = params.text_document.uri

        doc = self.workspace.get_text_document(uri)
        if doc is None:
            return

        logger.debug("Document changed: %s", uri)
        self._check_document(uri, doc.source)

    def _on_did_save(self, params: types.DidSaveTextDocumentParams) -> None:
        """Handle document save notification."""
        uri = params.text_document.uri
        logger.info("Document saved: %s", uri)

        doc = self.workspace.get_text_document(uri)
        if doc:
            self._check_document(uri, doc.source)

    def _on_did_close(self, params: types.DidCloseTextDocumentParams) -> None:
        """Handle document close notification."""
        uri = params.text_document.uri
        logger.info("Document closed: %s", uri)

        # Clear diagnostics
        self._publish_diagnostics(uri, [])

    # =========================================================================
    # Hover
    # =========================================================================

    def _on_hover(self, params: types.HoverParams) -> Optional[types.Hover]:
        """Handle hover request."""
        uri = params.text_document.uri

        doc = self.workspace.get_text_document(uri)
        if doc is None:
            return None

        return get_hover_for_document(doc.source, uri, lenient_eof=self.lenient_eof)


def create_server(lenient_eof: bool = False) -> BoofLanguageServer:
    """
    Create and configure a boof language server instance.

    Returns:
        Configured BoofLanguageServer instance
    """
    server = BoofLanguageServer(lenient_eof=lenient_eof)

    @server.feature(types.INITIALIZED)
    def on_initialized(
        params: types.InitializedParams,  # noqa: ARG001
    ) -> None:
        """Handle initialized notification."""
        logger.info("boof Language Server initialized successfully")

    @server.feature(types.SHUTDOWN)
    def on_shutdown(
        params: None,  # noqa: ARG001
    ) -> None:
        """Handle shutdown request."""
        logger.info("Shutting down boof Language Server")

    return server


def main() -> None:
    """
    Main entry point for the boof language server.

    Starts the server in stdio mode for IDE integration.
    """
    parser = argparse.ArgumentParser(
        description="boof Language Server",
        prog="boof-lsp",
    )
    parser.add_argument(
        "--tcp",
        action="store_true",
        help="Start server in TCP mode instead of stdio",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to in TCP mode (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=2087,
        help="Port to listen on in TCP mode (default: 2087)",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="info",
        help="Logging level (default: info)",
    )
    parser.add_argument(
        "--lenient-eof",
        action="store_true",
        help="Accept a missing closing token at end of input",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    server = create_server(lenient_eof=args.lenient_eof)

    if args.tcp:
        logger.info("Starting boof LSP in TCP mode on %s:%s", args.host, args.port)
        server.start_tcp(args.host, args.port)
    else:
        logger.info("Starting boof LSP in stdio mode")
        server.start_io()


if __name__ == "__main__":
    main()
