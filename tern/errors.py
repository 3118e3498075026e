class TernError(Exception):
    """ Base class for all Tern host-level errors"""
    pass

class TernSyntaxError(TernError):
    """ Raised when source text cannot be turned into a program"""
    pass

class TernParseError(TernSyntaxError):
    """ Raised by the interpreter front-end when the parser reported errors"""

    def __init__(self, errors: list[str]):
        super().__init__("\n".join(errors))
        self.errors = list(errors)

class TernTypeError(TernError):
    """ Raised when a value of the wrong kind reaches a host API"""

class TernImportError(TernError):
    """ Raised when a module file cannot be located or read"""
