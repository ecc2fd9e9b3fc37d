import typing as _ty

from .options import OptionsLike
from .parser import QueryDict, parse


class ParsedUrl(_ty.NamedTuple):
    url: str
    query: QueryDict


def remove_hash(url: str) -> str:
    return url.partition("#")[0]


def extract(url: str) -> str:
    """Return the query part of ``url``, without the ``?`` and any fragment."""
    url = remove_hash(url)
    _, found, query = url.partition("?")
    return query if found else ""


def parse_url(url: str, options: OptionsLike = None, /, **overrides) -> ParsedUrl:
    return ParsedUrl(
        remove_hash(url).partition("?")[0] or "",
        parse(extract(url), options, **overrides),
    )
