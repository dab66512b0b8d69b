"""
Reader for the movie database text format.

Each line describes one movie: the title followed by its cast, all
separated by a delimiter (``/`` by default)::

    Alien (1979)/Weaver, Sigourney/Skerritt, Tom/Hurt, John

Blank lines are skipped.
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

logger = logging.getLogger(__name__)


class DatabaseLoadError(Exception):
    """Raised when a movie database cannot be read."""

    pass


def split_record(line: str, delimiter: str = "/") -> list[str]:
    """
    Split one database line into ``[movie, actor, actor, ...]``.

    A trailing newline is dropped; empty fields (``a//b``) are kept out.
    """
    line = line.rstrip("\r\n")
    return [field for field in line.split(delimiter) if field]


def parse_records(lines: Iterable[str], delimiter: str = "/") -> Iterator[list[str]]:
    """Yield the non-empty records of an iterable of lines."""
    for lineno, line in enumerate(lines, start=1):
        record = split_record(line, delimiter)
        if not record:
            continue
        if len(record) == 1:
            logger.debug("line %d: movie %r has no cast", lineno, record[0])
        yield record


def read_records(source: Path | str | Iterable[str], delimiter: str = "/") -> list[list[str]]:
    """
    Read every record from a database file or an iterable of lines.

    Args:
        source: Path to the database, or already-open lines
        delimiter: Field separator

    Returns:
        List of records, each ``[movie, actor, ...]``

    Raises:
        DatabaseLoadError: If the file cannot be opened or decoded
    """
    if isinstance(source, (str, Path)):
        try:
            with open(source, encoding="utf-8") as f:
                return list(parse_records(f, delimiter))
        except (OSError, UnicodeDecodeError) as e:
            raise DatabaseLoadError(f"cannot read movie database {source}: {e}") from e
    return list(parse_records(source, delimiter))
