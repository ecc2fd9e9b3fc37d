import typing as _ty

from .formats import ArrayFormat

Comparator: _ty.TypeAlias = _ty.Callable[[str, str], int]
Sort: _ty.TypeAlias = "bool | Comparator"
OptionsLike: _ty.TypeAlias = "_ty.NamedTuple | _ty.Mapping[str, _ty.Any] | None"


def _merge(cls, options: OptionsLike, overrides: dict[str, _ty.Any]):
    if options is None:
        options = {}
    elif isinstance(options, cls):
        options = options._asdict()
    elif not isinstance(options, _ty.Mapping):
        raise TypeError(
            f"options should be a {cls.__name__} or a mapping, "
            f"not {type(options).__name__!r}"
        )
    values = {**options, **overrides}
    unknown = set(values).difference(cls._fields)
    if unknown:
        raise TypeError(
            f"unexpected option(s) for {cls.__name__}: {', '.join(sorted(unknown))}"
        )
    merged = cls(**values)
    if not isinstance(merged.sort, bool) and not callable(merged.sort):
        raise TypeError(
            f"sort should be a bool or a comparator, not {type(merged.sort).__name__!r}"
        )
    return merged._replace(array_format=ArrayFormat(merged.array_format))


class ParseOptions(_ty.NamedTuple):
    decode: bool = True
    sort: Sort = True
    array_format: ArrayFormat = ArrayFormat.NONE
    parse_numbers: bool = False
    parse_booleans: bool = False

    @classmethod
    def merge(cls, options: OptionsLike = None, /, **overrides) -> "ParseOptions":
        """Defaults, then ``options``, then ``overrides``."""
        return _merge(cls, options, overrides)


class StringifyOptions(_ty.NamedTuple):
    encode: bool = True
    strict: bool = True
    sort: Sort = True
    array_format: ArrayFormat = ArrayFormat.NONE

    @classmethod
    def merge(cls, options: OptionsLike = None, /, **overrides) -> "StringifyOptions":
        return _merge(cls, options, overrides)
