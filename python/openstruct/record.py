import collections
from collections.abc import MutableMapping
import enum
import inspect
import logging
import sys
import types

from .errors import (
    FieldNotFoundError,
    FrozenRecordError,
    InvalidArgumentCountError,
    UndefinedFieldError,
)
from .guard import rendering
from .trait import Tabled

__all__ = ["OpenStruct", "field_name"]

logger = logging.getLogger(__name__)

_MISSING = object()


def field_name(key):
    """Normalize a field key to its canonical (interned string) form."""
    if isinstance(key, enum.Enum):
        key = key.name

    if not isinstance(key, str):
        raise TypeError(f"{key!r} is not a symbol nor a string")

    return sys.intern(str(key))


@collections.abc.MutableMapping.register
class OpenStruct:
    """
    A record whose fields are installed at runtime.

    Fields are kept in one insertion-ordered table. They can be read and
    written as attributes, by name through `get`/`set`, or with item access:

        person = OpenStruct(name="John Smith")
        person.age = 70
        person.dump()  # {'name': 'John Smith', 'age': 70}

    Names that are not valid identifiers are still fields; use `get`, `set`
    or `record[name]` for them. Setting a field to None keeps the field, only
    `delete_field` removes it.
    """

    def __init__(self, pairs=None, /, **kwargs):
        d = self.__dict__
        d.setdefault("_table", {})
        d["_frozen"] = False

        if pairs or kwargs:
            self.load(pairs or (), **kwargs)

    @classmethod
    def from_dict_ref(cls, table):
        """Wrap `table` as the field table without copying it."""
        self = cls.__new__(cls)
        self.__dict__["_table"] = table
        self.__dict__["_frozen"] = False
        return self

    @property
    def table(self):
        return types.MappingProxyType(self._table)

    @property
    def frozen(self):
        return self._frozen

    # fields

    def _new_field(self, key, value):
        if self._frozen:
            raise FrozenRecordError(self)
        self._table[field_name(key)] = value

    def get(self, name, default=_MISSING):
        try:
            return self._table[field_name(name)]
        except KeyError:
            if default is _MISSING:
                raise UndefinedFieldError(name, self) from None
            return default

    def set(self, name, *values):
        if len(values) != 1:
            raise InvalidArgumentCountError(len(values))
        self._new_field(name, values[0])

    def load(self, pairs=(), /, **kwargs):
        """
        Install every pair as a field. Existing fields not mentioned keep
        their values; mentioned ones are overwritten in place and new ones
        are appended.
        """
        if pairs:
            if isinstance(pairs, Tabled):
                pairs = pairs.table
            if hasattr(pairs, "items"):
                pairs = pairs.items()

            for key, value in pairs:
                self._new_field(key, value)

        for key, value in kwargs.items():
            self._new_field(key, value)

    merge = load
    update = load

    def dump(self, *keys):
        """
        Return the fields as a new dict.

        When keys are given, every field not named in `keys` is removed from
        the record itself before the remaining fields are returned. Keys that
        are neither strings nor enum members match no field.
        """
        if keys:
            self._keep_only(keys)
        return dict(self._table)

    to_dict = dump

    def _keep_only(self, keys):
        wanted = set()
        for key in keys:
            try:
                wanted.add(field_name(key))
            except TypeError:
                continue

        dropped = [key for key in self._table if key not in wanted]
        if not dropped:
            return

        if self._frozen:
            raise FrozenRecordError(self)

        for key in dropped:
            del self._table[key]
        logger.debug("dump(%s) dropped fields %s", sorted(wanted), dropped)

    def delete_field(self, name):
        """Remove a field and return its last value."""
        if self._frozen:
            raise FrozenRecordError(self)

        key = field_name(name)
        try:
            value = self._table.pop(key)
        except KeyError:
            raise FieldNotFoundError(name, self) from None

        logger.debug("deleted field %s from %s", key, type(self).__name__)
        return value

    delete = delete_field

    def pop(self, name, default=_MISSING):
        try:
            return self.delete_field(name)
        except FieldNotFoundError:
            if default is _MISSING:
                raise
            return default

    def freeze(self):
        self.__dict__["_frozen"] = True
        logger.debug("froze %s with %d fields", type(self).__name__, len(self))
        return self

    # attribute access

    def __getattr__(self, name):
        # only reached when ordinary lookup fails
        try:
            table = self.__dict__["_table"]
        except KeyError:
            raise UndefinedFieldError(name, self) from None

        try:
            return table[name]
        except KeyError:
            raise UndefinedFieldError(name, self) from None

    def __setattr__(self, name, value):
        self._new_field(name, value)

    def __delattr__(self, name):
        self.delete_field(name)

    # MutableMapping

    def __len__(self):
        return len(self._table)

    def __getitem__(self, key):
        return self._table[field_name(key)]

    def __setitem__(self, key, item):
        self._new_field(key, item)

    def __delitem__(self, key):
        self.delete_field(key)

    def __iter__(self):
        return iter(self._table)

    def __contains__(self, key):
        try:
            return field_name(key) in self._table
        except TypeError:
            return False

    def __or__(self, other):
        if isinstance(other, (OpenStruct, dict)):
            new = self.copy()
            new.load(other)
            return new
        return NotImplemented

    def __ror__(self, other):
        if isinstance(other, dict):
            new = self.__class__(other)
            new.load(self)
            return new
        return NotImplemented

    def __ior__(self, other):
        self.load(other)
        return self

    def __copy__(self):
        return self.__class__.from_dict_ref(self._table.copy())

    def copy(self):
        return self.__copy__()

    # pickle

    def __getstate__(self):
        return self.dump()

    def __setstate__(self, state):
        self.__dict__["_table"] = {}
        self.__dict__["_frozen"] = False
        self.load(state)

    # Other

    def __eq__(self, other):
        if not isinstance(other, Tabled):
            return False

        try:
            table = other.table
        except Exception:
            return False

        if not isinstance(table, collections.abc.Mapping):
            return False
        return self._table == dict(table)

    def __hash__(self):
        if not self._frozen:
            raise TypeError(f"unhashable type: '{type(self).__name__}'")
        return hash(frozenset(self._table.items()))

    def __repr__(self):
        name = type(self).__name__

        with rendering(self) as entered:
            if not self._table:
                return f"<{name}>"
            if not entered:
                return f"<{name} ...>"

            fields = ", ".join(
                f"{key}={value!r}" for key, value in self._table.items()
            )
            return f"<{name} {fields}>"

    __str__ = __repr__
    inspect = __repr__

    def _repr_pretty_(self, p, cycle):
        name = type(self).__name__

        if not self._table:
            p.text(f"<{name}>")
            return
        if cycle:
            p.text(f"<{name} ...>")
            return

        with p.group(len(name) + 2, f"<{name} ", ">"):
            for idx, (key, value) in enumerate(self._table.items()):
                if idx:
                    p.text(",")
                    p.breakable()
                p.text(f"{key}=")
                p.pretty(value)


for base in (MutableMapping, collections.abc.Mapping):
    # copy over mixin methods (pop, setdefault, keys, items, ...)
    for key, value in base.__dict__.items():
        if key.startswith("__"):
            continue

        if not inspect.isfunction(value):
            continue

        if hasattr(value, "__isabstractmethod__") and value.__isabstractmethod__:
            continue

        if key not in OpenStruct.__dict__:
            setattr(OpenStruct, key, value)
