"""JsonML exception hierarchy.

Decode errors describe wire input that cannot become a markup tree; render
errors describe a tree that cannot be written as HTML. Both derive from
``ValueError`` so callers treating bad input generically keep working.
"""


class JsonMLError(Exception):
    """Base exception for all JsonML errors."""


class DecodeError(JsonMLError, ValueError):
    """Raised when a token sequence cannot be decoded into an element."""


class MissingNameError(DecodeError):
    """Raised when a tag sequence is empty and has no name."""


class MalformedSequenceError(DecodeError):
    """Raised when the token after a tag name is neither attributes nor an element."""


class TokenTypeError(DecodeError):
    """Raised when a token has the wrong primitive type for its position."""


class RenderError(JsonMLError, ValueError):
    """Raised when an element cannot be rendered as HTML."""


class InvalidTagNameError(RenderError):
    """Raised when a tag name contains a character other than ASCII alphanumerics."""


class InvalidAttributeNameError(RenderError):
    """Raised when an attribute name contains a character HTML forbids."""
