"""Scrawl language compiler front end."""

from __future__ import annotations

from scrawlc.errors import EndOfContent, ScannerError, UnsupportedCharacter
from scrawlc.scanner import Scanner, scan
from scrawlc.syntree import Node, SynTree
from scrawlc.tokens import ETX, LF, Position, Token

__version__ = "0.1.0"

__all__ = [
    "ETX",
    "LF",
    "EndOfContent",
    "Node",
    "Position",
    "Scanner",
    "ScannerError",
    "SynTree",
    "Token",
    "UnsupportedCharacter",
    "scan",
]
