"""Domain enumerations."""

from enum import Enum, auto


class Severity(Enum):
    """Diagnostic severity."""

    ERROR = auto()  # almost certainly a runtime failure
    WARNING = auto()  # misuse, logging still works
    INFO = auto()  # informational


class Category(Enum):
    """Issue category.

    - MESSAGES: how the log message is built
    - CORRECTNESS: what the platform will do with the call
    """

    MESSAGES = auto()
    CORRECTNESS = auto()


class ExpressionKind(Enum):
    """Syntactic shape of an argument expression.

    Host-language neutral. Hosts map their AST nodes onto these.
    """

    LITERAL = auto()  # constant value (string, number, boolean)
    NULL_LITERAL = auto()  # null / None
    NAME = auto()  # simple name reference
    QUALIFIED = auto()  # receiver.member property/field access
    CALL = auto()  # function or method call
    CONCATENATION = auto()  # string built with + or interpolation
    CONDITIONAL = auto()  # cond ? a : b / a if cond else b
    OTHER = auto()


class Binding(Enum):
    """What a NAME expression resolves to."""

    LOCAL = auto()
    CONSTANT = auto()
    FIELD = auto()
    PARAMETER = auto()
    UNKNOWN = auto()


class AncestorKind(Enum):
    """Syntactic node kind on the way from a call up to its method."""

    PARENTHESES = auto()
    EXPRESSION = auto()
    CALL = auto()
    METHOD = auto()  # code-block boundary (method, lambda, class, module)
