"""astprofile custom exceptions."""


class AstProfileError(Exception):
    """Base exception for astprofile errors."""


class ParseError(AstProfileError):
    """Source file could not be read or parsed into a syntax tree."""


class UnsupportedLanguageError(AstProfileError):
    """No tree provider handles the given file."""


class TreeTooDeepError(AstProfileError):
    """Syntax tree nests deeper than the configured traversal limit."""


class RenderError(AstProfileError):
    """Rendering, viewing or cleaning up the graph artifacts failed."""
