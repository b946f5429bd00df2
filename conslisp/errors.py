class LispError(Exception):
    """ Base class for all conslisp errors"""
    pass

class LispParseError(LispError):
    """ Raised when source text is not a well-formed s-expression"""
    pass

class LispRuntimeError(LispError):
    """ Base class for failures raised while evaluating an expression"""
    pass

class LispUnboundSymbol(LispRuntimeError):
    """ Raised when a symbol is used before it is bound"""
    pass

class LispNotCallable(LispRuntimeError):
    """ Raised when the head of an application is neither a function nor a special form"""
    pass

class LispNotSupported(LispRuntimeError):
    """ Raised when an operation (car, cdr, arithmetic, ...) is applied to an unsupporting value"""
    pass

class LispArityError(LispRuntimeError):
    """ Raised when the number of arguments passed to a function or special form is incorrect"""
    pass

class LispAlreadyBound(LispRuntimeError):
    """ Raised when define targets a symbol that is already bound"""
    pass

class LispInvalidSymbol(LispRuntimeError):
    """ Raised when a symbol is required but another value is given"""
    pass

class LispNumericError(LispRuntimeError):
    """ Raised when the decimal arithmetic layer signals a fault"""
    pass

class LispDivideByZero(LispNumericError):
    """ Raised on division or modulo by zero"""
    pass

class LispStackExhausted(LispRuntimeError):
    """ Raised when evaluation recurses deeper than the host stack allows"""
    pass
