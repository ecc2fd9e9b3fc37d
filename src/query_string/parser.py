import functools as _func
import logging
import re as _re
import typing as _ty

from . import codec as _codec
from .formats import decoder_for
from .options import OptionsLike, ParseOptions
from .utils import split_on_first

_log = logging.getLogger(__name__)

QueryValue: _ty.TypeAlias = "str | int | float | bool | None"
QueryDict: _ty.TypeAlias = "dict[str, QueryValue | list[QueryValue]]"

_LEADING = _re.compile(r"^[?#&]")
_DECIMAL = _re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INTEGER = _re.compile(r"[+-]?[0-9]+")
_RADIX = {"0x": 16, "0o": 8, "0b": 2}
_RADIX_LITERAL = _re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_INFINITY = _re.compile(r"([+-]?)Infinity")


def to_number(value: str) -> int | float | None:
    """Read ``value`` as a numeric literal, or return ``None``.

    Accepts what JavaScript's ``Number()`` accepts: decimals with sign,
    fraction and exponent, ``0x``/``0o``/``0b`` integers and ``Infinity``,
    with surrounding whitespace. A blank string reads as ``0``.
    """
    text = value.strip()
    if not text:
        return 0
    if _INTEGER.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # too many digits for int(), float() gives inf or an approximation
            return float(text)
    if _DECIMAL.fullmatch(text):
        return float(text)
    if _RADIX_LITERAL.fullmatch(text):
        return int(text[2:], _RADIX[text[:2].lower()])
    match = _INFINITY.fullmatch(text)
    if match:
        return float(f"{match.group(1)}inf")
    return None


def _coerce(value: str | None, options: ParseOptions) -> QueryValue:
    if value is None:
        return None
    if options.parse_numbers:
        number = to_number(value)
        if number is not None:
            return number
    if options.parse_booleans:
        lowered = value.lower()
        if lowered in ("true", "false"):
            return lowered == "true"
    return value


def _numeric_order(key: str) -> tuple[int, str]:
    # compares digit strings by value without int(), which caps their length
    digits = key.lstrip("0")
    return len(digits), digits


def _sort_index_keys(value: _ty.Mapping[str, _ty.Any]) -> list:
    # "" comes from empty brackets and counts as 0
    keys = sorted(sorted(value), key=_numeric_order)
    return [value[key] for key in keys]


def parse(query: _ty.Any, options: OptionsLike = None, /, **overrides) -> QueryDict:
    """Parse a query string into a dict.

    A leading ``?``, ``#`` or ``&`` is ignored. Keys without ``=`` map to
    ``None`` and repeated keys are combined according to ``array_format``.
    Anything that is not a ``str`` parses to an empty dict.
    """
    options = ParseOptions.merge(options, **overrides)
    decode = decoder_for(options.array_format)
    result: QueryDict = {}

    if not isinstance(query, str):
        _log.debug("not parsing %s input", type(query).__name__)
        return result

    query = _LEADING.sub("", query.strip(), count=1)
    if not query:
        return result

    for param in query.split("&"):
        pair = split_on_first(param.replace("+", " "), "=")
        key = pair[0]
        value = pair[1] if len(pair) > 1 else None
        if options.decode:
            key = _codec.decode(key)
            if value is not None:
                value = _codec.decode(value)
        decode(key, _coerce(value, options), result)

    if options.sort is False:
        return result

    if options.sort is True:
        keys = sorted(result)
    else:
        keys = sorted(result, key=_func.cmp_to_key(options.sort))

    sorted_result: QueryDict = {}
    for key in keys:
        value = result[key]
        if isinstance(value, _ty.Mapping):
            value = _sort_index_keys(value)
        sorted_result[key] = value
    return sorted_result
