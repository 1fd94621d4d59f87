"""Property-based tests for scanner invariants using Hypothesis."""

from hypothesis import given, settings
from hypothesis import strategies as st

from scrawlc.errors import ScannerError
from scrawlc.scanner import Scanner, scan
from scrawlc.tokens import ETX, LF, OPERATORS, STRING, Position

# Characters that always scan without error (no quote, so no strings)
_SCANNABLE = "abxyz_019 \t\r\n=+-<>!&|:^%*/(){}[];,.@#~?"

# Operator text -> the source spelling that produces it
_SPELLINGS = {text: spelling for spelling, text in OPERATORS.items()}


class TestPositionInvariants:
    @given(
        st.characters(),
        st.integers(0, 10_000),
        st.integers(0, 10_000),
        st.integers(0, 10_000),
    )
    def test_advance(self, ch: str, index: int, line: int, column: int) -> None:
        pos = Position(index, line, column)
        nxt = pos.advance(ch)
        assert nxt.index == index + 1
        if ch == "\n":
            assert nxt.line == line + 1
            assert nxt.column == 0
        else:
            assert nxt.line == line
            assert nxt.column == column + 1


class TestBufferInvariants:
    @given(st.text(max_size=200))
    def test_padded_buffer(self, source: str) -> None:
        scanner = Scanner(source)
        assert scanner.buffer.endswith(LF + ETX)
        assert scanner.buffer[:-2] == source


class TestScanInvariants:
    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_tokens_or_scanner_error(self, source: str) -> None:
        try:
            tokens = scan(source)
        except ScannerError as exc:
            assert all(t.position.index < exc.position.index for t in exc.tokens)
        else:
            assert all(t.position.index < len(source) for t in tokens)

    @given(st.text(alphabet=_SCANNABLE, max_size=300))
    @settings(max_examples=200)
    def test_positions_increase(self, source: str) -> None:
        tokens = scan(source)
        indexes = [t.position.index for t in tokens]
        assert indexes == sorted(set(indexes))

    @given(st.text(alphabet=_SCANNABLE, max_size=300))
    @settings(max_examples=200)
    def test_token_text_matches_source(self, source: str) -> None:
        for tok in scan(source):
            start = tok.position.index
            spelling = _SPELLINGS.get(tok.text, tok.text) if tok.is_symbol else tok.text
            assert source[start : start + len(spelling)] == spelling
            assert tok.position == Position.locate(source, start)

    @given(st.text(alphabet="abc \n", max_size=100), st.text(alphabet="abc \n", max_size=100))
    def test_string_literal_round_trip(self, before: str, body: str) -> None:
        tokens = scan(f'{before}"{body}"')
        assert tokens[-1].kind == STRING
        assert tokens[-1].text == body
