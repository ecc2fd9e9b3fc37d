import logging
import re as _re
import typing as _ty

import uritools as _uritools

from .utils import to_str

_log = logging.getLogger(__name__)

ENCODING = "utf-8"
# encodeURIComponent leaves these alone, the strict variant escapes them
LENIENT_SAFE = "!'()*"
# longest UTF-8 sequence, in bytes
_MAX_SEQUENCE = 4

_ESCAPE_RUN = _re.compile("(?:%[0-9a-fA-F]{2})+")


def encode(value: _ty.Any, strict: bool = True) -> str:
    """Percent-encode ``value`` (converted to text first).

    Only the unreserved characters ``A-Z a-z 0-9 - . _ ~`` survive a strict
    encode; a lenient one also keeps ``! ' ( ) *``.
    """
    safe = "" if strict else LENIENT_SAFE
    return _uritools.uriencode(to_str(value), safe, ENCODING).decode("ascii")


def _decode_run(match: _re.Match) -> str:
    tokens = _re.findall("%..", match.group())
    decoded = []
    i = 0
    while i < len(tokens):
        for size in range(min(_MAX_SEQUENCE, len(tokens) - i), 0, -1):
            chunk = "".join(tokens[i : i + size])
            try:
                decoded.append(_uritools.uridecode(chunk, ENCODING))
            except UnicodeError:
                continue
            i += size
            break
        else:
            decoded.append(tokens[i])
            i += 1
    return "".join(decoded)


def decode(value: str) -> str:
    """Percent-decode ``value`` without ever failing.

    Malformed escapes such as ``%zz`` are kept as they are, and so is the
    original text of escaped bytes that do not form valid UTF-8.
    """
    try:
        return _uritools.uridecode(value, ENCODING)
    except UnicodeError:
        _log.debug("falling back to tolerant decode for %r", value)
    return _ESCAPE_RUN.sub(_decode_run, value)
