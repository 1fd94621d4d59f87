"""Token kinds, source positions, and character classification helpers."""

from __future__ import annotations

import string
from dataclasses import dataclass

# Padding appended to every scanner buffer
LF = "\n"
ETX = "\x03"

# Semantic token kinds; punctuation and operators use their own text as kind
IDENTIFIER = "identifier"
NUMBER = "number"
STRING = "string"

PUNCTUATION = frozenset("(){}[];,.@#~?")

# Source spelling -> token text. Every prefix of a spelling is itself a
# spelling, so extending one character at a time always finds the longest
# match. "+-" is spelled differently from the "++" token it produces.
OPERATORS: dict[str, str] = {
    op: op
    for op in (
        "=", "==",
        "+", "+=",
        "-", "-=", "--", "->",
        ">", ">=", ">>", ">>=",
        "<", "<=", "<<", "<<=",
        "*", "*=",
        "!", "!=",
        "/",
        "&", "&=", "&&",
        "|", "|=", "||",
        ":", "::",
        "^", "^=",
        "%", "%=",
    )
} | {"+-": "++"}  # fmt: skip

OPERATOR_LEADS = frozenset(op[0] for op in OPERATORS)

WHITESPACE = frozenset("\t\n\r ")

_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_CHARS = _IDENT_START | frozenset(string.digits)
_DIGITS = frozenset(string.digits)


@dataclass(frozen=True, slots=True)
class Position:
    """Location of a character in a scanner buffer.

    All three fields are 0-based; ``str()`` renders the 1-based ``line:column``
    form shown to users.
    """

    index: int = 0
    line: int = 0
    column: int = 0

    def advance(self, ch: str) -> Position:
        """Return the position following *ch*."""
        if ch == LF:
            return Position(self.index + 1, self.line + 1, 0)
        return Position(self.index + 1, self.line, self.column + 1)

    @classmethod
    def locate(cls, text: str, index: int) -> Position:
        """Return the position of offset *index* in *text*."""
        if not 0 <= index <= len(text):
            raise ValueError(f"offset {index} is outside 0..{len(text)}")
        pos = cls()
        for ch in text[:index]:
            pos = pos.advance(ch)
        return pos

    def __str__(self) -> str:
        return f"{self.line + 1}:{self.column + 1}"


@dataclass(frozen=True, slots=True)
class Token:
    """A scanned token: kind, literal text, and start position."""

    kind: str
    text: str
    position: Position

    @property
    def is_symbol(self) -> bool:
        """True for punctuation and operators, whose kind is their text."""
        return self.kind == self.text

    def __str__(self) -> str:
        if self.is_symbol:
            return f"<{self.text}>@{self.position}"
        return f"<{self.kind}>@{self.position} = {self.text}"


def is_ident_start(ch: str) -> bool:
    """Return True if ch can begin an identifier."""
    return ch in _IDENT_START


def is_ident_char(ch: str) -> bool:
    """Return True if ch can continue an identifier."""
    return ch in _IDENT_CHARS


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII digit."""
    return ch in _DIGITS
