from .formats import ArrayFormat
from .options import ParseOptions, StringifyOptions
from .parser import parse
from .query import Query
from .stringifier import stringify
from .url import ParsedUrl, extract, parse_url, remove_hash
from .utils import UNDEFINED

__all__ = [
    "ArrayFormat",
    "ParseOptions",
    "ParsedUrl",
    "Query",
    "StringifyOptions",
    "UNDEFINED",
    "extract",
    "parse",
    "parse_url",
    "remove_hash",
    "stringify",
]
