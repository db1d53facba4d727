"""
Accessor-by-name path for records.

`send(record, "name")` reads a field and `send(record, "name=", value)`
writes one, for any field name including ones that are not identifiers.
"""

from .errors import InvalidArgumentCountError, UndefinedFieldError
from .record import OpenStruct, field_name

__all__ = ["send", "responds_to"]


def _split_writer(name):
    name = field_name(name)
    if name.endswith("=") and len(name) > 1:
        return name[:-1], True
    return name, False


def send(obj, name, *args):
    name, is_writer = _split_writer(name)

    if isinstance(obj, OpenStruct):
        if is_writer:
            if len(args) != 1:
                raise InvalidArgumentCountError(len(args))
            obj.set(name, args[0])
            return args[0]

        if name in obj:
            if args:
                raise InvalidArgumentCountError(len(args), 0)
            return obj.get(name)

    if is_writer:
        if len(args) != 1:
            raise InvalidArgumentCountError(len(args))
        setattr(obj, name, args[0])
        return args[0]

    try:
        attr = getattr(obj, name)
    except AttributeError:
        raise UndefinedFieldError(name, obj) from None

    if callable(attr):
        return attr(*args)

    if args:
        raise InvalidArgumentCountError(len(args), 0)
    return attr


def responds_to(obj, name):
    name, is_writer = _split_writer(name)

    if isinstance(obj, OpenStruct) and name in obj:
        return True

    if is_writer:
        return False

    return hasattr(obj, name)
