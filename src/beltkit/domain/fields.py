"""Field splitting for delimited text lines."""

from __future__ import annotations


def split_fields(line: str, delimiter: str) -> list[str]:
    """Split *line* on *delimiter*, preserving order and empty fields.

    A single trailing newline is ignored. An empty line yields no fields.

    Examples:
        >>> split_fields("a,b,,c", ",")
        ['a', 'b', '', 'c']
        >>> split_fields("", ",")
        []
        >>> split_fields("one two", " ")
        ['one', 'two']
    """
    if not delimiter:
        msg = "Delimiter must not be empty"
        raise ValueError(msg)

    text = line.removesuffix("\n").removesuffix("\r")
    if not text:
        return []
    return text.split(delimiter)


def get_field(line: str, delimiter: str, index: int, default: str | None = None) -> str | None:
    """Return field *index* of *line* (negative indices count from the end).

    Returns *default* when the line has no such field.
    """
    fields = split_fields(line, delimiter)
    try:
        return fields[index]
    except IndexError:
        return default
