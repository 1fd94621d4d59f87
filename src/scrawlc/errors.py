"""Scanner error types with formatted source context."""

from __future__ import annotations

from scrawlc.tokens import Position, Token


class ScannerError(Exception):
    """Base class for lexical errors; raised on the first one found.

    ``tokens`` holds whatever the scan produced before the failure.
    """

    def __init__(self, message: str, position: Position, source: str = "") -> None:
        self.message = message
        self.position = position
        self.source = source
        self.tokens: tuple[Token, ...] = ()
        super().__init__(message)

    def format(self, filename: str = "input.scr") -> str:
        """Render the error with its source line and a caret under the position."""
        lines = self.source.splitlines(keepends=True)
        line_idx = self.position.line
        col = self.position.column + 1

        # Source line without its terminator
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        pad = " " * (col - 1)

        line_num = str(self.position.line + 1)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )


class EndOfContent(ScannerError):
    """The cursor ran past the end of the buffer."""

    def __init__(
        self, position: Position, reason: str = "end of content", source: str = ""
    ) -> None:
        self.reason = reason
        super().__init__(f"cannot access {position}, {reason}", position, source)


class UnsupportedCharacter(ScannerError):
    """No token rule matches the character."""

    def __init__(self, character: str, position: Position, source: str = "") -> None:
        self.character = character
        super().__init__(f"{character!r} is an unsupported character", position, source)
