"""Scrawl scanner: converts source text into a flat token list."""

from __future__ import annotations

from collections.abc import Callable

from scrawlc.errors import EndOfContent, ScannerError, UnsupportedCharacter
from scrawlc.tokens import (
    ETX,
    IDENTIFIER,
    LF,
    NUMBER,
    OPERATOR_LEADS,
    OPERATORS,
    PUNCTUATION,
    STRING,
    WHITESPACE,
    Position,
    Token,
    is_digit,
    is_ident_char,
    is_ident_start,
)


class Scanner:
    """Tokenize Scrawl source text in a single fail-fast pass.

    The content is padded with a line feed and an end-of-text sentinel, so
    one character of lookahead never runs off the buffer. The sentinel is
    recognised by its index; ``current_character`` and ``peek_next`` report
    it as ``None``.
    """

    def __init__(self, content: str, position: Position | None = None) -> None:
        self._content = content
        self._buffer = content + LF + ETX
        self._sentinel = len(self._buffer) - 1
        self._pos = position if position is not None else Position()
        if not 0 <= self._pos.index <= self._sentinel:
            raise EndOfContent(self._pos, source=content)
        self._char = self._char_at(self._pos.index)

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    @property
    def content(self) -> str:
        return self._content

    @property
    def buffer(self) -> str:
        """The padded text the scanner walks over."""
        return self._buffer

    @property
    def current_position(self) -> Position:
        return self._pos

    @property
    def current_character(self) -> str | None:
        return self._char

    def _char_at(self, index: int) -> str | None:
        if index == self._sentinel:
            return None
        return self._buffer[index]

    def peek_next(self) -> str | None:
        """Return the character after the current one without consuming it."""
        index = self._pos.index + 1
        if index > self._sentinel:
            raise EndOfContent(self._pos.advance(ETX), source=self._content)
        return self._char_at(index)

    def advance(self) -> Position:
        """Move one character forward and return the position moved from."""
        start = self._pos
        if start.index >= self._sentinel:
            raise EndOfContent(start.advance(ETX), source=self._content)
        self._pos = start.advance(self._buffer[start.index])
        self._char = self._char_at(self._pos.index)
        return start

    def stay(self) -> Position:
        """Return the current position without consuming anything."""
        return self._pos

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def scan(self) -> list[Token]:
        """Scan the rest of the buffer and return the token list.

        On a lexical error the tokens produced so far are attached to the
        exception as ``tokens`` before it propagates.
        """
        tokens: list[Token] = []
        try:
            while self.peek_next() is not None:
                tok = self._scan_one()
                if tok is not None:
                    tokens.append(tok)
        except ScannerError as exc:
            exc.tokens = tuple(tokens)
            raise
        return tokens

    def _scan_one(self) -> Token | None:
        ch = self._char

        if ch is None:
            raise EndOfContent(self._pos, source=self._content)

        if is_ident_start(ch):
            start = self._pos
            return Token(IDENTIFIER, self._take_while(is_ident_char), start)

        if is_digit(ch):
            start = self._pos
            return Token(NUMBER, self._take_while(is_digit), start)

        if ch in WHITESPACE:
            self.advance()
            return None

        if ch in PUNCTUATION:
            return Token(ch, ch, self.advance())

        if ch == '"':
            return self._scan_string()

        if ch == "/" and self.peek_next() == "/":
            self._skip_line_comment()
            return None

        if ch in OPERATOR_LEADS:
            return self._scan_operator(ch)

        raise UnsupportedCharacter(ch, self._pos, self._content)

    def _take_while(self, predicate: Callable[[str], bool]) -> str:
        chars = []
        while self._char is not None and predicate(self._char):
            chars.append(self._char)
            self.advance()
        return "".join(chars)

    def _scan_operator(self, lead: str) -> Token:
        """Match the longest operator starting at the current character.

        A character that does not extend the match is left unconsumed and
        starts the next token.
        """
        spelling = lead
        start = self.advance()
        while self._char is not None and spelling + self._char in OPERATORS:
            spelling += self._char
            self.advance()
        text = OPERATORS[spelling]
        return Token(text, text, start)

    def _skip_line_comment(self) -> None:
        self.advance()
        self.advance()
        while self._char is not None and self._char != LF:
            self.advance()

    def _scan_string(self) -> Token:
        start = self.advance()  # opening quote
        chars = []
        while self._char != '"':
            if self._char is None:
                raise EndOfContent(start, "unterminated string literal", self._content)
            chars.append(self._char)
            self.advance()
        self.advance()  # closing quote
        return Token(STRING, "".join(chars), start)


def scan(source: str, position: Position | None = None) -> list[Token]:
    """Convenience function: scan source text and return the token list."""
    return Scanner(source, position).scan()
