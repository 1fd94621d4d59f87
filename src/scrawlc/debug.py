"""Token listings for --debug and --json output."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any, TextIO

from scrawlc.tokens import Token


def format_listing(tokens: Sequence[Token]) -> str:
    """Render one ``index: token`` line per token, counting from 1."""
    return "".join(f"{i}: {tok}\n" for i, tok in enumerate(tokens, start=1))


def dump_tokens(tokens: Sequence[Token], *, file: TextIO = sys.stderr) -> None:
    """Print the numbered token listing to *file*."""
    for i, tok in enumerate(tokens, start=1):
        file.write(f"  {i:>4}  {tok.kind:<12} {tok.text!r} @ {tok.position}\n")


def tokens_to_json(tokens: Sequence[Token]) -> list[dict[str, Any]]:
    """Return a JSON-ready list; line and column are 1-based."""
    return [
        {
            "kind": tok.kind,
            "text": tok.text,
            "index": tok.position.index,
            "line": tok.position.line + 1,
            "column": tok.position.column + 1,
        }
        for tok in tokens
    ]
