import typing as _ty

from .formats import ArrayFormat
from .parser import QueryDict, QueryValue, parse
from .stringifier import stringify


class Query(str):
    def __new__(
        cls,
        query: str | _ty.Mapping[str, _ty.Any] | None = "",
        /,
        **options,
    ):
        if isinstance(query, str):
            pass
        elif query is None or isinstance(query, _ty.Mapping):
            query = stringify(query, **options)
        else:
            raise TypeError(
                f"query should be a str or a mapping, not {type(query).__name__!r}"
            )
        return str.__new__(cls, query)

    def decode(query, **options) -> QueryDict:
        return parse(str(query), **options)

    def to_dict(query) -> dict[str, list[QueryValue]]:
        """Every key with all of its values, in the order they appear."""
        query_: dict[str, list[QueryValue]] = {}
        for k, v in query.decode(sort=False, array_format=ArrayFormat.NONE).items():
            query_[k] = v if isinstance(v, list) else [v]
        return query_
