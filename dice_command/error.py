class ParserError(ValueError):
    """Base class for failures to parse a dice command."""


class ParseError(ParserError):
    """The command doesn't match the grammar, has trailing input or a count
    which is too large."""


class UnknownError(ParserError):
    """Parsing ended for some other reason, e.g. incomplete input."""

    def __init__(self, message: str = "Unknown error.") -> None:
        super().__init__(message)
