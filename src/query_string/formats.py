"""Conventions for writing and reading array-valued query parameters.

Every :class:`ArrayFormat` has a pair of steps. The encode step appends the
segments for one array element to the list built so far, the decode step
merges one ``key=value`` pair into the mapping being parsed. Both halves of a
pair must agree, so a string written with one format reads back with the same
format (``comma`` and ``index`` are lossy in the ways documented below).
"""

import enum as _enum
import re as _re
import typing as _ty

from . import codec as _codec
from .utils import UNDEFINED, to_str

if _ty.TYPE_CHECKING:
    from .options import StringifyOptions

EncodeStep: _ty.TypeAlias = _ty.Callable[
    [str, list[str], _ty.Any, int, "StringifyOptions"], list[str]
]
DecodeStep: _ty.TypeAlias = _ty.Callable[[str, _ty.Any, dict], None]

_BRACKET_SUFFIX = _re.compile(r"\[\]\Z")
_INDEX_SUFFIX = _re.compile(r"\[([0-9]*)\]\Z")


class ArrayFormat(str, _enum.Enum):
    NONE = "none"
    """``a=1&a=2``"""
    BRACKET = "bracket"
    """``a[]=1&a[]=2``"""
    INDEX = "index"
    """``a[0]=1&a[1]=2``"""
    COMMA = "comma"
    """``a=1,2``"""

    def __str__(self):
        return self.value


def encode_value(value, options: "StringifyOptions") -> str:
    if options.encode:
        return _codec.encode(value, options.strict)
    return to_str(value)


def _encode_none(key, result, value, index, options):
    if value is UNDEFINED:
        return result
    if value is None:
        result.append(encode_value(key, options))
    else:
        result.append(f"{encode_value(key, options)}={encode_value(value, options)}")
    return result


def _encode_bracket(key, result, value, index, options):
    if value is UNDEFINED:
        return result
    if value is None:
        result.append(f"{encode_value(key, options)}[]")
    else:
        result.append(f"{encode_value(key, options)}[]={encode_value(value, options)}")
    return result


def _encode_index(key, result, value, index, options):
    # position in the output, so skipped elements do not leave gaps
    index = len(result)
    if value is UNDEFINED:
        return result
    if value is None:
        result.append(f"{encode_value(key, options)}[{index}]")
    else:
        result.append(
            f"{encode_value(key, options)}[{encode_value(index, options)}]={encode_value(value, options)}"
        )
    return result


def _encode_comma(key, result, value, index, options):
    if value is None or value is UNDEFINED or value == "":
        return result
    if not result:
        result.append(f"{encode_value(key, options)}={encode_value(value, options)}")
    else:
        result[-1] = f"{result[-1]},{encode_value(value, options)}"
    return result


def _decode_none(key, value, accumulator):
    if key not in accumulator:
        accumulator[key] = value
    elif isinstance(accumulator[key], list):
        accumulator[key].append(value)
    else:
        accumulator[key] = [accumulator[key], value]


def _decode_bracket(key, value, accumulator):
    match = _BRACKET_SUFFIX.search(key)
    key = _BRACKET_SUFFIX.sub("", key)
    if not match:
        accumulator[key] = value
    elif key not in accumulator:
        accumulator[key] = [value]
    elif isinstance(accumulator[key], list):
        accumulator[key].append(value)
    else:
        accumulator[key] = [accumulator[key], value]


def _decode_index(key, value, accumulator):
    """Collect ``key[n]`` pairs into ``accumulator[key][n]``.

    The nested dict is keyed by the digits between the brackets and is only
    turned into a list by the parser when it sorts the result.
    """
    match = _INDEX_SUFFIX.search(key)
    key = _INDEX_SUFFIX.sub("", key)
    if not match:
        accumulator[key] = value
        return
    if not isinstance(accumulator.get(key), dict):
        accumulator[key] = {}
    accumulator[key][match.group(1)] = value


def _decode_comma(key, value, accumulator):
    # a single element containing a comma reads back as several elements
    if isinstance(value, str) and "," in value:
        value = value.split(",")
    accumulator[key] = value


_FORMATS: dict[ArrayFormat, tuple[EncodeStep, DecodeStep]] = {
    ArrayFormat.NONE: (_encode_none, _decode_none),
    ArrayFormat.BRACKET: (_encode_bracket, _decode_bracket),
    ArrayFormat.INDEX: (_encode_index, _decode_index),
    ArrayFormat.COMMA: (_encode_comma, _decode_comma),
}


def encoder_for(array_format: ArrayFormat | str) -> EncodeStep:
    return _FORMATS[ArrayFormat(array_format)][0]


def decoder_for(array_format: ArrayFormat | str) -> DecodeStep:
    return _FORMATS[ArrayFormat(array_format)][1]
