"""Reader for the line-oriented ``.properties`` text format.

Grammar handled here:

* natural lines end with ``\\n``, ``\\r`` or ``\\r\\n``; leading spaces, tabs
  and form feeds are ignored;
* blank lines and lines whose first character is ``#`` or ``!`` are skipped;
* a line ending in an odd number of backslashes continues on the next line,
  whose leading whitespace is dropped;
* the key ends at the first unescaped ``=``, ``:`` or whitespace; whitespace
  and at most one ``=``/``:`` separate it from the value;
* ``\\t``, ``\\n``, ``\\r``, ``\\f`` and ``\\uXXXX`` are decoded, any other
  escaped character stands for itself.
"""
from __future__ import annotations

import os
import re
import string
from typing import Dict, Iterator, Tuple, Union

_NEWLINE = re.compile(r"\r\n|\r|\n")
_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def iter_logical_lines(text: str) -> Iterator[str]:
    """Yield logical lines with comments, blanks and continuations resolved.

    Escapes are left untouched; the continuation backslash is removed.
    """
    pending: str | None = None
    for natural in _NEWLINE.split(text):
        line = natural.lstrip(_WHITESPACE)
        if pending is None:
            if not line or line[0] in "#!":
                continue
            current = line
        else:
            current = pending + line
        if _continues(line):
            pending = current[:-1]
            continue
        pending = None
        yield current
    if pending is not None:
        # Continuation marker on the last line of the input.
        yield pending


def unescape(text: str) -> str:
    """Decode backslash escapes of a key or value.

    Raises
    ------
    ValueError
        On a ``\\u`` escape not followed by four hexadecimal digits.
    """
    if "\\" not in text:
        return text
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        i += 1
        if c != "\\":
            out.append(c)
            continue
        if i >= n:
            break
        nxt = text[i]
        i += 1
        if nxt == "u":
            digits = text[i:i + 4]
            if len(digits) < 4 or any(d not in string.hexdigits for d in digits):
                raise ValueError("Malformed \\uxxxx encoding.")
            out.append(chr(int(digits, 16)))
            i += 4
        else:
            out.append(_ESCAPES.get(nxt, nxt))
    result = "".join(out)
    if any("\ud800" <= ch <= "\udfff" for ch in result):
        # Join UTF-16 surrogate pairs written as two \u escapes.
        result = result.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")
    return result


def split_entry(line: str) -> Tuple[str, str]:
    """Split one logical line into its decoded key and value."""
    n = len(line)
    key_end = n
    value_start = n
    has_sep = False
    escaped = False
    for i, c in enumerate(line):
        if escaped:
            escaped = False
        elif c == "\\":
            escaped = True
        elif c in _SEPARATORS:
            key_end, value_start, has_sep = i, i + 1, True
            break
        elif c in _WHITESPACE:
            key_end, value_start = i, i + 1
            break

    j = value_start
    while j < n:
        c = line[j]
        if c not in _WHITESPACE:
            if not has_sep and c in _SEPARATORS:
                has_sep = True
            else:
                break
        j += 1
    return unescape(line[:key_end]), unescape(line[j:])


def parse_properties(text: str) -> Dict[str, str]:
    """Parse properties text; a key repeated in the same text keeps its last value."""
    props: Dict[str, str] = {}
    for line in iter_logical_lines(text):
        key, value = split_entry(line)
        props[key] = value
    return props


def read_properties(path: Union[str, "os.PathLike[str]"], encoding: str) -> Dict[str, str]:
    """Read and parse one properties file.

    Raises ``OSError`` when the file cannot be read and ``ValueError`` (which
    includes ``UnicodeDecodeError``) when its content is invalid.
    """
    # newline="" keeps bare \r so the grammar above sees it.
    with open(path, "r", encoding=encoding, newline="") as handle:
        return parse_properties(handle.read())


__all__ = [
    "iter_logical_lines",
    "unescape",
    "split_entry",
    "parse_properties",
    "read_properties",
]
