from __future__ import annotations


class EmptyValueError(LookupError):
    """Raised when the value of an empty option is requested."""

    def __init__(self, message: str = "No such element."):
        super().__init__(message)
