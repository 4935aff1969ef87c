"""
Hover information for boof LSP.

A boof document is a single expression, so hovering anywhere shows the
whole document's parsed tree and the value it evaluates to.
"""

from typing import Optional

from lsprotocol import types

from boof.compiler import evaluate_source
from boof.utils.errors import BoofError


def get_hover_for_document(
    source: str,
    uri: str,
    lenient_eof: bool = False,
) -> Optional[types.Hover]:
    """
    Build hover contents for a document.

    Args:
        source: The boof source code
        uri: The document URI
        lenient_eof: Passed to the parser

    Returns:
        Hover with the printed tree and value, or None when the document
        does not lex and parse (its diagnostic already says why)
    """
    try:
        result = evaluate_source(source, filename=uri, lenient_eof=lenient_eof)
    except BoofError:
        return None

    value = "\n".join(
        [
            "```boof",
            result.printed_ast,
            "```",
            "",
            f"**Value:** `{result.value!r}`",
        ]
    )
    return types.Hover(
        contents=types.MarkupContent(kind=types.MarkupKind.Markdown, value=value),
    )
