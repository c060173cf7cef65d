class OwlError(Exception):
    """ Base class for all Owl errors"""
    pass

class OwlSyntaxError(OwlError):
    """ Raised when source text cannot be parsed"""

class OwlTypeError(OwlError):
    """ Raised when a form receives a value of the wrong variant"""

class OwlArityError(OwlError):
    """ Raised when a special form receives the wrong number of arguments"""

class OwlArrayError(OwlError):
    """ Raised when add targets a name that does not hold an array"""

class OwlRecursionError(OwlError):
    """ Raised when evaluation nests deeper than the interpreter allows"""
