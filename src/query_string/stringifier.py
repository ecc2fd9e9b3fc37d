import functools as _func
import typing as _ty

from .formats import encode_value, encoder_for
from .options import OptionsLike, StringifyOptions
from .utils import UNDEFINED, to_str


def stringify(
    mapping: _ty.Mapping[str, _ty.Any] | None,
    options: OptionsLike = None,
    /,
    **overrides,
) -> str:
    """Build a query string from ``mapping``.

    ``None`` values are written as a bare key, :data:`UNDEFINED` values are
    left out, lists and tuples are written with ``array_format``.
    """
    if not mapping:
        return ""
    if not isinstance(mapping, _ty.Mapping):
        raise TypeError(
            f"expected a mapping to stringify, not {type(mapping).__name__!r}"
        )

    options = StringifyOptions.merge(options, **overrides)
    encode_step = encoder_for(options.array_format)

    keys = list(mapping)
    if options.sort is True:
        keys.sort(key=to_str)
    elif options.sort is not False:
        keys.sort(key=_func.cmp_to_key(options.sort))

    segments: list[str] = []
    for key in keys:
        value = mapping[key]
        if value is UNDEFINED:
            continue
        if value is None:
            segments.append(encode_value(key, options))
        elif isinstance(value, (list, tuple)):
            result: list[str] = []
            for index, item in enumerate(value):
                result = encode_step(key, result, item, index, options)
            segments.append("&".join(result))
        elif isinstance(value, _ty.Mapping):
            raise TypeError(f"cannot stringify nested mapping under {key!r}")
        else:
            key, value = encode_value(key, options), encode_value(value, options)
            segments.append(f"{key}={value}")

    return "&".join(segment for segment in segments if segment)
