import math as _math
import typing as _ty


class _Undefined:
    """Marks a value that should be left out entirely, as opposed to ``None``
    which is written as a bare key."""

    __slots__ = ()
    _instance: "_Undefined" = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "UNDEFINED"

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


def split_on_first(string: str, separator: str) -> list[str]:
    """Split ``string`` on the first occurrence of ``separator`` only.

    Returns ``[string]`` when the separator is empty or missing.
    """
    if not isinstance(string, str) or not isinstance(separator, str):
        raise TypeError("expected the arguments to be of type str")
    if separator == "":
        return [string]
    left, found, right = string.partition(separator)
    if not found:
        return [string]
    return [left, right]


def to_str(value: _ty.Any) -> str:
    """Render a scalar the way a JavaScript ``String(value)`` would."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if _math.isnan(value):
            return "NaN"
        if _math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)
