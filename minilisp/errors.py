
class MiniLispError(Exception):
    """ Base class for all minilisp errors"""
    pass

class MiniLispSyntaxError(MiniLispError):
    """ Raised when the reader cannot build an expression from the tokens"""

class UnexpectedEOF(MiniLispSyntaxError):
    """ Raised when the tokens run out in the middle of an expression"""

class UnmatchedCloseParen(MiniLispSyntaxError):
    """ Raised when a ')' is read without a matching '('"""

class InvalidSymbol(MiniLispError):
    """ Raised when a binding target is not a symbol"""

class ArityMismatch(MiniLispError, IndexError):
    """ Raised when a procedure or special form gets the wrong number of arguments"""

class MiniLispTypeError(MiniLispError, TypeError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class StackLimitExceeded(MiniLispError):
    """ Raised when nested closure calls go deeper than the configured limit"""

class UndefinedVariableWarning(UserWarning):
    """ Issued when set! targets a symbol that is not bound anywhere in scope"""
