from .errors import (
    OpenStructError,
    UndefinedFieldError,
    InvalidArgumentCountError,
    FieldNotFoundError,
    FrozenRecordError,
)
from .record import OpenStruct, field_name
from .trait import Tabled
from .access import send, responds_to

__all__ = [
    "OpenStruct",
    "field_name",
    "Tabled",
    "send",
    "responds_to",
    "OpenStructError",
    "UndefinedFieldError",
    "InvalidArgumentCountError",
    "FieldNotFoundError",
    "FrozenRecordError",
]
