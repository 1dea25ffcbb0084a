"""Immutable cursor infrastructure for layout scanning.

Implements the immutable cursor pattern over a layout string.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Lookahead reads the shared source in place (startswith with offset),
      so matching a directive never slices the input

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

from timelayout.diagnostics import ErrorTemplate

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable read-only position in a layout string.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Small footprint, cursors are created per character
        3. Simple position - Just an integer offset into a shared source
        4. current raises at EOF - No None handling on the hot path

    Example:
        >>> cursor = Cursor("Jan 2", 0)
        >>> cursor.current
        'J'
        >>> cursor.startswith("Jan")
        True
        >>> cursor.advance(3).remaining
        ' 2'
        >>> Cursor("Jan", 3).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True once position >= source length."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    @property
    def remaining(self) -> str:
        """Source text from the current position to the end."""
        return self.source[self.pos :]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def startswith(self, text: str, offset: int = 0) -> bool:
        """Check whether text appears at position + offset.

        Compares in place against the shared source; no substring is built.

        Example:
            >>> Cursor("_2006", 0).startswith("2006", 1)
            True
            >>> Cursor("Ja", 0).startswith("Jan")  # Too short
            False
        """
        return self.source.startswith(text, self.pos + offset)

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged),
            clamped to the end of the source
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]
