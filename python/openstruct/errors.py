__all__ = [
    "OpenStructError",
    "UndefinedFieldError",
    "InvalidArgumentCountError",
    "FieldNotFoundError",
    "FrozenRecordError",
]


class OpenStructError(Exception):
    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class UndefinedFieldError(OpenStructError, AttributeError):
    """Read of a field that was never installed, or has been deleted."""

    def __init__(self, name, record):
        super().__init__(
            f"undefined field '{name}' for {type(record).__name__} object"
        )
        self.field = name


class InvalidArgumentCountError(OpenStructError, TypeError):
    def __init__(self, given, expected=1):
        super().__init__(f"wrong number of arguments ({given} for {expected})")
        self.given = given
        self.expected = expected


class FieldNotFoundError(OpenStructError, KeyError):
    def __init__(self, name, record):
        super().__init__(
            f"field '{name}' not defined for {type(record).__name__} object"
        )
        self.field = name


class FrozenRecordError(OpenStructError, TypeError):
    def __init__(self, record):
        super().__init__(f"can't modify frozen {type(record).__name__}")
