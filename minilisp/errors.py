class MiniLispError(Exception):
    """ Base class for all minilisp errors"""
    pass

class MiniLispSyntaxError(MiniLispError):
    """ Raised when the reader meets malformed input"""

class MiniLispSymbolTooLong(MiniLispSyntaxError):
    """ Raised when a symbol name exceeds the configured maximum length"""

class MiniLispUndefinedSymbol(MiniLispError):
    """ Raised when a symbol is not bound anywhere in the scope chain"""

    def __init__(self, name: str):
        super().__init__(f"Undefined symbol: {name}")
        self.name = name

class MiniLispNotCallable(MiniLispError):
    """ Raised when the head of a call form is not a function or primitive"""

class MiniLispMalformedArgumentList(MiniLispError):
    """ Raised when the tail of a call form is not a proper list"""

class MiniLispArityError(MiniLispError):
    """ Raised when the number of arguments passed to a primitive is incorrect"""

class MiniLispTypeError(MiniLispError):
    """ Raised when the types of arguments passed to a primitive are incorrect"""
