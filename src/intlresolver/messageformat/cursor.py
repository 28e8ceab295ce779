"""Immutable cursor infrastructure for the ICU template parser.

Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
"""

from dataclasses import dataclass

from intlresolver.diagnostics import ErrorTemplate, MessageSyntaxError

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("{name}", 0)
        >>> cursor.current
        '{'
        >>> cursor.advance().current
        'n'
        >>> cursor.pos  # Original unchanged
        0
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True once position reaches the end of the template."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Current character.

        Raises:
            MessageSyntaxError: If at end of input
        """
        if self.is_eof:
            raise MessageSyntaxError(
                ErrorTemplate.unexpected_eof(self.pos, "more input"), position=self.pos
            )
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Character at position + offset, or None beyond EOF."""
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions."""
        return Cursor(self.source, min(self.pos + count, len(self.source)))

    def slice_to(self, end_pos: int) -> str:
        """Source text from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def skip_whitespace(self) -> "Cursor":
        """Skip Unicode whitespace, which ICU allows around argument parts."""
        c = self
        while not c.is_eof and c.current.isspace():
            c = c.advance()
        return c

    def expect(self, char: str, expected: str | None = None) -> "Cursor":
        """Consume ``char`` or raise a syntax error naming what was expected."""
        what = expected or repr(char)
        if self.is_eof:
            raise MessageSyntaxError(
                ErrorTemplate.unexpected_eof(self.pos, what), position=self.pos
            )
        if self.current != char:
            raise MessageSyntaxError(
                ErrorTemplate.unexpected_character(self.current, self.pos, what),
                position=self.pos,
            )
        return self.advance()


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Every parse function has the shape
    ``def parse_foo(cursor: Cursor, ...) -> ParseResult[Foo]`` and raises
    MessageSyntaxError on malformed input.
    """

    value: T
    cursor: Cursor
