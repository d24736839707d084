class RSchemeError(Exception):
    """ Base class for all RScheme errors"""
    pass

class RSchemeLexingError(RSchemeError):
    """ Raised when the tokenizer meets text it cannot classify"""
    pass

class RSchemeParsingError(RSchemeError):
    """ Raised when the token stream has no valid list structure"""
    pass

class RSchemeExprNotTerminatedError(RSchemeParsingError):
    """ Raised by one-shot parsing when an opening parenthesis is never closed"""

class RSchemeRuntimeError(RSchemeError):
    """ Raised when evaluation fails"""

class RSchemeNameError(RSchemeRuntimeError):
    """ Raised when an identifier is not bound anywhere in the environment chain"""

class RSchemeArityError(RSchemeRuntimeError):
    """ Raised when the number of arguments passed to a form or closure is incorrect"""

class RSchemeTypeError(RSchemeRuntimeError):
    """ Raised when the types of arguments passed to an operator or primitive are incorrect"""
