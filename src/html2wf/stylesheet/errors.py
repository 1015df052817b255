"""Stylesheet parser error types."""


class StylesheetParseError(Exception):
    """Raised when stylesheet source cannot be tokenized or nests braces badly.

    ``line`` and ``column`` are 1-based and point at the first character the
    grammar could not accept (a stray ``}``, a selector where a declaration
    was expected).  Both are ``None`` when the parser reports no position.
    """

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
