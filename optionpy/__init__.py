from .option import Option, Some, NONE, none, some, option, Matcher
from .errors import EmptyValueError
from .logger import ConsoleLogger

__all__ = [
    "Option",
    "Some",
    "NONE",
    "none",
    "some",
    "option",
    "Matcher",
    "EmptyValueError",
    "ConsoleLogger",
]
