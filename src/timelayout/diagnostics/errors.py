"""Layout exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.
Scanning itself never raises for text input; these errors only surface at
the package boundary (wrong argument types, unknown layout names).

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class LayoutError(Exception):
    """Base exception for all timelayout errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LayoutError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class LayoutTypeError(LayoutError, TypeError):
    """Layout argument is not a str.

    Also a TypeError so callers catching the builtin keep working.
    """


class UnknownLayoutError(LayoutError, LookupError):
    """Requested name is not in the named layout table.

    Example:
        >>> try:
        ...     get_layout("RFC9999")
        ... except UnknownLayoutError as error:
        ...     print(error.name, error.diagnostic.code.name)
        RFC9999 LAYOUT_NOT_FOUND
    """

    def __init__(self, message: str | Diagnostic, *, name: str = "") -> None:
        """Initialize UnknownLayoutError.

        Args:
            message: Error message string OR Diagnostic object
            name: The layout name that was requested
        """
        super().__init__(message)
        self.name = name
