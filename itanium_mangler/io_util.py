"""
Utility functions for scanning text streams.
"""

from contextlib import contextmanager
from io import StringIO, TextIOBase
from typing import Iterable, Iterator, Optional

WHITESPACE: frozenset[str] = frozenset(" \t")


def read_exact(src: TextIOBase, size: int) -> str:
    """
    Read exactly `size` chars from `src`, or raise a ValueError
    """
    value = src.read(size)
    if len(value) != size:
        raise ValueError(f"Unable to read {size} chars; got {value!r}")
    return value


@contextmanager
def peeking(src: TextIOBase, offset: int = 0) -> Iterator[None]:
    """
    Store the current offset in `src`,
    and restore it at the end of the context.
    An optional offset can be added to start peeking further ahead from the current
    location.
    """
    ptr = src.tell()
    if offset:
        src.seek(ptr + offset)

    try:
        yield
    finally:
        src.seek(ptr)


def peek(src: TextIOBase, n: int = 1, offset: int = 0) -> str:
    """
    Read up to `n` chars from `src` without advancing the offset.
    Returns "" at the end of the buffer.
    """
    with peeking(src, offset=offset):
        return src.read(n)


def bytes_left(src: TextIOBase, offset: int = 0) -> int:
    """
    Retrieve the number of chars left in `src`.
    An optional offset can be added.
    """
    start: int = src.tell() + offset
    with peeking(src):
        src.seek(0, 2)
        end: int = src.tell()

    return end - start


def lookahead_for(src: TextIOBase, chars: Iterable[str]) -> Optional[int]:
    """
    Look ahead in the buffer for a character in the given collection.

    If one is found, return the number of chars that need to be read from the current
    offset in order to reach the character.

    If none of the given chars are found before the end of the buffer,
    returns None.
    """
    chars = set(chars)
    offset: int = 0
    with peeking(src):
        char = src.read(1)
        while char:
            if char in chars:
                return offset
            offset += 1
            char = src.read(1)

    return None


def lookahead_for_last(src: TextIOBase, char: str) -> Optional[int]:
    """
    Look ahead in the buffer for the last occurrence of `char`.

    Returns the offset of that occurrence from the current location, or None if
    the rest of the buffer does not contain it.
    """
    with peeking(src):
        offset = src.read().rfind(char)

    if offset < 0:
        return None
    return offset


def lookahead_while(src: TextIOBase, chars: Iterable[str], base_offset: int = 0) -> int:
    """
    Look ahead in the buffer as long as the buffer contains characters in the given collection.
    Return the number of subsequent characters found.
    An optional offset can be passed to start from a later point in the buffer.
    """
    chars = set(chars)
    num_chars: int = 0
    with peeking(src, offset=base_offset):
        char = src.read(1)
        while char and char in chars:
            num_chars += 1
            char = src.read(1)

    return num_chars


def skip_whitespace(src: TextIOBase) -> int:
    """
    Consume any whitespace at the current location and return how much was skipped.
    """
    count = lookahead_while(src, WHITESPACE)
    read_exact(src, count)
    return count


@contextmanager
def as_stringio(src: str) -> Iterator[StringIO]:
    """Wrap `src` in a `StringIO`, and assert it was fully consumed at the end of the context"""
    buf = StringIO(src)
    yield buf
    leftover = buf.read()
    if leftover:
        raise ValueError(f"Unable to scan full input, leftover chars: {leftover!r}")
