"""Parser error types"""


class FormatError(ValueError):
    """Raised when JSON input does not match the document schema."""
