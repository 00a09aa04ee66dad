from tips.types import ErrorVal


class TipsError(Exception):
    """Exception type used to propagate TIPS lexical, syntax and runtime errors."""
    def __init__(self, err: ErrorVal):
        super().__init__(err.message)
        self.err = err

    @property
    def name(self) -> str:
        return self.err.name

    @property
    def message(self) -> str:
        return self.err.message


class LexerError(TipsError):
    """Raised when the parser observes an UNKNOWN token."""
    def __init__(self, message: str):
        super().__init__(ErrorVal('LexicalError', message))


class ParseError(TipsError):
    """Raised on the first token that does not fit the grammar."""
    def __init__(self, message: str):
        super().__init__(ErrorVal('SyntaxError', message))


class DeclarationError(TipsError):
    """Raised when an identifier is declared twice or after the VAR section."""
    def __init__(self, message: str):
        super().__init__(ErrorVal('DeclarationError', message))


class NestingError(TipsError):
    """Raised when a program nests deeper than the Python stack allows."""
    def __init__(self):
        super().__init__(ErrorVal('InternalError', 'expression nested too deeply'))
