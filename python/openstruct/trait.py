class TabledMeta(type):
    def __instancecheck__(cls, instance):
        # structural: anything exposing `table`, whatever its type
        try:
            return hasattr(instance, "table")
        except Exception:
            return False


class Tabled(metaclass=TabledMeta):
    """Anything exposing a `table` mapping of field names to values."""


__all__ = ["Tabled"]
