"""Various auxiliary functions which are used throughout the library."""

import functools
from collections.abc import Iterable
from typing import Any, TypeVar

import numpy

WORD_BITS = 64
WORD_MASK = 2**WORD_BITS - 1

# The multiplier shared by all the Romu generators.
MULTIPLIER = numpy.uint64(15241094284759029579)

# Its inverse modulo 2**64 (exists since the multiplier is odd).
MULTIPLIER_INVERSE = numpy.uint64(pow(int(MULTIPLIER), -1, 2**WORD_BITS))

Word = TypeVar("Word", numpy.uint64, numpy.ndarray[Any, numpy.dtype[numpy.uint64]])


def rotl(value: Word, amount: int) -> Word:
    """
    Rotates 64-bit words ``value`` (a ``numpy.uint64`` scalar or array) left by ``amount`` bits.
    Bits shifted past the most significant one reappear at the least significant end.
    """
    # Cast to uint is required by numpy coercion rules.
    # "% WORD_BITS" handles ``amount == 0``, where the right shift would be by 64.
    s1 = numpy.uint64(amount % WORD_BITS)
    s2 = numpy.uint64((WORD_BITS - amount) % WORD_BITS)
    return (value << s1) | (value >> s2)  # type: ignore[return-value]


def rotr(value: Word, amount: int) -> Word:
    """The inverse of :py:func:`rotl`."""
    return rotl(value, (WORD_BITS - amount) % WORD_BITS)


def wrap_in_tuple(seq_or_elem: None | int | Iterable[int]) -> tuple[int, ...]:
    """
    If ``seq_or_elem`` is a sequence, converts it to a ``tuple``,
    otherwise returns a tuple with a single element ``seq_or_elem``.
    """
    if seq_or_elem is None:
        return tuple()
    if isinstance(seq_or_elem, (int, numpy.integer)):
        return (int(seq_or_elem),)
    return tuple(seq_or_elem)


class IgnoreIntegerOverflow:
    """Context manager for ignoring integer overflow in numpy operations on scalars."""

    def __enter__(self) -> None:
        self._settings = numpy.seterr(over="ignore")

    def __exit__(self, *args: object, **kwds: object) -> None:
        numpy.seterr(**self._settings)


def product(seq: Iterable[int]) -> int:
    """Returns the product of elements in the iterable ``seq``."""
    return functools.reduce(lambda x1, x2: x1 * x2, seq, 1)


def check_positive(name: str, value: Any) -> int:
    """
    Returns ``value`` as an ``int`` if it is a positive integer, raises ``ValueError`` otherwise.
    """
    if isinstance(value, bool) or not isinstance(value, (int, numpy.integer)) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return int(value)
