"""
Seed expansion and state validation.

A Romu state is 128 to 256 bits wide, so a seed (which is often a single small integer)
has to be expanded to fill it.
Expansion is done by :py:class:`numpy.random.SeedSequence`, which hashes the seed
into well-mixed words, so that seeds differing in a single bit produce unrelated states.
The exact expansion is not a part of the Romu algorithm itself.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Union

import numpy
from numpy.lib import recfunctions

from romu.helpers import WORD_MASK

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from .variants import Variant


logger = logging.getLogger(__name__)

SeedLike = Union[None, int, Sequence[int], "NDArray[numpy.integer[Any]]", numpy.random.SeedSequence]


def _is_integer(value: Any) -> bool:
    return isinstance(value, (int, numpy.integer)) and not isinstance(value, bool)


def create_seed_sequence(seed: SeedLike = None) -> numpy.random.SeedSequence:
    """
    Normalizes ``seed`` into a :py:class:`numpy.random.SeedSequence`.

    :param seed: ``None`` for a seed drawn from the OS entropy source,
        a non-negative integer, a sequence or an array of non-negative integers,
        or a ready :py:class:`numpy.random.SeedSequence` (used as is).
    """
    if isinstance(seed, numpy.random.SeedSequence):
        return seed

    if seed is None:
        seed_seq = numpy.random.SeedSequence()
        logger.debug("Seeding from OS entropy: %d", seed_seq.entropy)
        return seed_seq

    if _is_integer(seed):
        if seed < 0:  # type: ignore[operator]
            raise ValueError(f"Invalid seed: {seed} (must be non-negative)")
        return numpy.random.SeedSequence(int(seed))  # type: ignore[arg-type]

    if isinstance(seed, numpy.ndarray):
        if seed.dtype.kind not in "ui":
            raise ValueError(f"Invalid seed: an integer array expected, got {seed.dtype}")
        values = seed.ravel().tolist()
    elif isinstance(seed, Sequence) and not isinstance(seed, (str, bytes)):
        values = list(seed)
    else:
        raise TypeError(f"Unsupported seed type: {type(seed).__name__}")

    if len(values) == 0:
        raise ValueError("Invalid seed: empty sequence")
    for value in values:
        if not _is_integer(value) or value < 0:
            raise ValueError(f"Invalid seed: {seed} (expected non-negative integers)")

    return numpy.random.SeedSequence([int(value) for value in values])


def state_words(state: NDArray[Any]) -> NDArray[numpy.uint64]:
    """
    Returns a ``(streams, words)`` array of ``numpy.uint64`` with the words of ``state``.
    """
    return recfunctions.structured_to_unstructured(state, dtype=numpy.uint64)


def find_state_defect(state: NDArray[Any]) -> str | None:
    """
    Returns the description of the reason ``state`` cannot be used for generation,
    or ``None`` if it can.
    A state cannot be used if any of its streams is all-zero
    (a fixed point of every Romu step), or if any two streams are identical.
    """
    words = state_words(state)

    zero_streams = numpy.flatnonzero((words == 0).all(axis=1))
    if zero_streams.size > 0:
        return f"stream {zero_streams[0]} has an all-zero state"

    if numpy.unique(words, axis=0).shape[0] < words.shape[0]:
        return "some streams have identical states"

    return None


def check_state(state: NDArray[Any]) -> None:
    """Raises ``ValueError`` if ``state`` is degenerate (see :py:func:`find_state_defect`)."""
    defect = find_state_defect(state)
    if defect is not None:
        raise ValueError(f"Invalid state: {defect}")


def expand_seed(
    variant: Variant, seed_seq: numpy.random.SeedSequence, streams: int
) -> NDArray[Any]:
    """
    Creates a state array with ``streams`` elements of ``variant.state_dtype``
    filled with words derived from ``seed_seq``.

    The output of :py:meth:`numpy.random.SeedSequence.generate_state` is deterministic,
    so if the first block of it happens to produce a degenerate state
    (the chance of it is about :math:`2^{-128}` per stream),
    the next block is used, and so on.
    The result is always a valid state, and is the same for equal seeds.
    """
    words = len(variant.words)
    block = words * streams

    attempt = 0
    while True:
        raw = seed_seq.generate_state(block * (attempt + 1), dtype=numpy.uint64)[block * attempt :]
        raw = raw.reshape(streams, words)

        state = numpy.empty(streams, variant.state_dtype)
        for i, name in enumerate(variant.words):
            state[name] = raw[:, i]

        defect = find_state_defect(state)
        if defect is None:
            return state

        logger.debug("Seed expansion attempt %d rejected: %s", attempt, defect)
        attempt += 1


def state_from_words(variant: Variant, words: Sequence[Any]) -> tuple[NDArray[Any], int | None]:
    """
    Creates a state array from explicitly given words.

    :param variant: a :py:class:`~romu.variants.Variant` object.
    :param words: one value per word in ``variant.words``, either each an integer
        (for a single stream), or each a sequence of integers of the same length
        (one element per stream).
    :returns: a tuple of the state array and the number of streams
        (``None`` if the words were given as scalars).
    """
    if len(words) != len(variant.words):
        raise ValueError(
            f"{variant.name} needs {len(variant.words)} state words "
            f"({', '.join(variant.words)}), got {len(words)}"
        )

    scalar = all(_is_integer(word) for word in words)

    columns = []
    for name, word in zip(variant.words, words):
        values = numpy.atleast_1d(numpy.asarray(word, dtype=object)).ravel().tolist()
        for value in values:
            if not _is_integer(value) or not 0 <= value <= WORD_MASK:
                raise ValueError(f"Invalid value for the state word {name}: {value!r}")
        columns.append(numpy.array([int(value) for value in values], numpy.uint64))

    streams = columns[0].size
    if streams == 0 or any(column.size != streams for column in columns):
        raise ValueError("All state words must have the same non-zero number of streams")

    state = numpy.empty(streams, variant.state_dtype)
    for name, column in zip(variant.words, columns):
        state[name] = column

    check_state(state)
    return state, None if scalar else streams
