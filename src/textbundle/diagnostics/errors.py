"""textbundle exception hierarchy.

Absent bundles and absent keys are not errors and never raise; see
TextBundleResolver. Argument errors use the builtin TypeError/ValueError.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["PropertiesSyntaxError", "TextBundleError"]


class TextBundleError(Exception):
    """Base exception for all textbundle errors."""


class PropertiesSyntaxError(TextBundleError):
    """Malformed .properties source.

    Raised by the parser for input that the property file grammar rejects,
    such as a truncated or non-hexadecimal \\uXXXX escape. The resolver
    absorbs it and records the bundle as absent.

    Attributes:
        line: 1-based number of the natural line where the error starts
        source_path: Human-readable origin of the source (optional)
    """

    def __init__(self, message: str, line: int, source_path: str | None = None) -> None:
        """Initialize PropertiesSyntaxError.

        Args:
            message: Error description
            line: 1-based line number of the offending logical line
            source_path: Human-readable origin of the source (optional)
        """
        location = f"{source_path}:{line}" if source_path else f"line {line}"
        super().__init__(f"{message} ({location})")
        self.line = line
        self.source_path = source_path
