"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode

# Cap on how many known names are listed in a lookup hint.
_MAX_HINT_NAMES: int = 5


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    # Base documentation URL
    _DOCS_BASE = "https://pkg.go.dev/time#pkg-constants"

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Unexpected end of input.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            hint="Check cursor.is_eof before reading cursor.current",
        )

    @staticmethod
    def layout_type_invalid(value: object) -> Diagnostic:
        """Layout argument is not a string.

        Args:
            value: The rejected argument

        Returns:
            Diagnostic for LAYOUT_TYPE_INVALID
        """
        msg = f"Layout must be str, got {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.LAYOUT_TYPE_INVALID,
            message=msg,
            hint="Decode bytes layouts before scanning them",
        )

    @staticmethod
    def cursor_position_invalid(position: int, length: int) -> Diagnostic:
        """Cursor position lies outside the layout.

        Args:
            position: The rejected cursor position
            length: Length of the layout source

        Returns:
            Diagnostic for CURSOR_POSITION_INVALID
        """
        msg = f"Cursor position {position} is outside layout of length {length}"
        return Diagnostic(
            code=DiagnosticCode.CURSOR_POSITION_INVALID,
            message=msg,
            hint="Start scanning at a position between 0 and len(layout)",
        )

    @staticmethod
    def layout_not_found(name: str, known: Iterable[str]) -> Diagnostic:
        """Named layout lookup failed.

        Args:
            name: The requested layout name
            known: Names present in the layout table

        Returns:
            Diagnostic for LAYOUT_NOT_FOUND
        """
        msg = f"Layout '{name}' not found"
        names = sorted(known)
        listed = ", ".join(names[:_MAX_HINT_NAMES])
        if len(names) > _MAX_HINT_NAMES:
            listed += ", ..."
        return Diagnostic(
            code=DiagnosticCode.LAYOUT_NOT_FOUND,
            message=msg,
            hint=f"Use one of: {listed}",
            help_url=ErrorTemplate._DOCS_BASE,
        )
