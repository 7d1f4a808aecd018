from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

import numpy

from romu import helpers, seeding
from romu.variants import Variant, romu_duo, romu_duo_jr, romu_quad, romu_trio

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from .seeding import SeedLike


class Romu:
    """
    A stateful Romu pseudo-random number generator.

    :param variant: a :py:class:`~romu.variants.Variant` object.
    :param seed: ``None`` for a random seed (taken from the OS entropy source),
        a non-negative integer, a sequence of non-negative integers,
        or a :py:class:`numpy.random.SeedSequence`.
    :param streams: ``None`` for a single generator,
        or the number of independent streams advanced together.
        Every stream has its own state expanded from ``seed``, no two of them are the same.

    If ``streams`` is ``None``, every draw is a Python ``int``;
    otherwise it is a ``numpy.uint64`` array of shape ``(streams,)``.

    The generator is not thread-safe; use a separate object (e.g. from :py:meth:`spawn`)
    in every thread.

    .. py:classmethod:: duo_jr(seed=None, streams=None)
    .. py:classmethod:: duo(seed=None, streams=None)
    .. py:classmethod:: trio(seed=None, streams=None)
    .. py:classmethod:: quad(seed=None, streams=None)

        Convenience constructors for the corresponding variants
        from :py:mod:`~romu.variants`.
    """

    def __init__(self, variant: Variant, seed: SeedLike = None, streams: int | None = None):
        if streams is not None:
            streams = helpers.check_positive("streams", streams)

        seed_seq = seeding.create_seed_sequence(seed)
        state = seeding.expand_seed(variant, seed_seq, 1 if streams is None else streams)
        self._setup(variant, state, streams, seed_seq)

    def _setup(
        self,
        variant: Variant,
        state: NDArray[Any],
        streams: int | None,
        seed_seq: numpy.random.SeedSequence,
    ) -> None:
        self._variant = variant
        self._state = state
        self._streams = streams
        self._seed_seq = seed_seq

    @classmethod
    def from_state(cls, variant: Variant, *words: Any) -> Romu:
        """
        Creates a generator with an explicitly given state, bypassing seed expansion.
        Mostly useful for reproducing reference sequences.

        :param variant: a :py:class:`~romu.variants.Variant` object.
        :param words: values for every word in ``variant.words``, in that order.
            Either all of them are integers (a single stream),
            or all of them are sequences of the same length (one element per stream).

        Raises ``ValueError`` if a value does not fit in 64 bits,
        if a stream is all-zero, or if two streams are the same.
        """
        state, streams = seeding.state_from_words(variant, words)
        entropy = seeding.state_words(state).ravel().tolist()
        obj = cls.__new__(cls)
        obj._setup(variant, state, streams, numpy.random.SeedSequence(entropy))
        return obj

    @classmethod
    def duo_jr(cls, seed: SeedLike = None, streams: int | None = None) -> Romu:
        return cls(romu_duo_jr(), seed=seed, streams=streams)

    @classmethod
    def duo(cls, seed: SeedLike = None, streams: int | None = None) -> Romu:
        return cls(romu_duo(), seed=seed, streams=streams)

    @classmethod
    def trio(cls, seed: SeedLike = None, streams: int | None = None) -> Romu:
        return cls(romu_trio(), seed=seed, streams=streams)

    @classmethod
    def quad(cls, seed: SeedLike = None, streams: int | None = None) -> Romu:
        return cls(romu_quad(), seed=seed, streams=streams)

    @property
    def variant(self) -> Variant:
        """The :py:class:`~romu.variants.Variant` of this generator."""
        return self._variant

    @property
    def streams(self) -> int | None:
        """The number of streams, or ``None`` for a single generator."""
        return self._streams

    @property
    def state(self) -> dict[str, Any]:
        """
        A copy of the current state as a dictionary
        ``{"variant": name, "state": {word_name: value}}``,
        where values are integers for a single generator and arrays for multiple streams.
        The values of ``"state"`` can be passed to :py:meth:`from_state` as they are.
        """
        if self._streams is None:
            words = {name: int(self._state[name][0]) for name in self._variant.words}
        else:
            words = {name: self._state[name].copy() for name in self._variant.words}
        return dict(variant=self._variant.name, state=words)

    def next_u64(self) -> Any:
        """
        Advances the state and returns the next raw 64-bit output.
        """
        outputs = self._variant.step(self._state)
        if self._streams is None:
            return int(outputs[0])
        return outputs

    def random_raw(self, size: None | int | tuple[int, ...] = None) -> Any:
        """
        Returns ``size`` consecutive raw outputs, advancing the state accordingly.

        :param size: ``None`` to return a single output (same as :py:meth:`next_u64`),
            or the shape of the output array.
            For multiple streams, the stream axis is appended to the shape.
        :returns: a ``numpy.uint64`` array.
        """
        if size is None:
            return self.next_u64()

        shape = helpers.wrap_in_tuple(size)
        for length in shape:
            helpers.check_positive("size", length)

        draws = helpers.product(shape)
        streams = len(self._state)
        result = numpy.empty((draws, streams), numpy.uint64)
        for i in range(draws):
            result[i] = self._variant.step(self._state)

        if self._streams is None:
            return result.reshape(shape)
        return result.reshape(shape + (streams,))

    def rewind(self, draws: int = 1) -> None:
        """
        Returns the state to the one it had ``draws`` steps before.
        After that the generator will repeat the last ``draws`` outputs.

        This is possible because every Romu step is a bijection,
        which is also the reason these generators must not be used for cryptography.
        """
        draws = helpers.check_positive("draws", draws)
        for _ in range(draws):
            self._variant.unstep(self._state)

    def spawn(self, n_children: int) -> list[Romu]:
        """
        Creates ``n_children`` new generators of the same variant and number of streams,
        seeded independently from this generator's seed
        (see :py:meth:`numpy.random.SeedSequence.spawn`).
        Repeated calls produce new children.
        """
        n_children = helpers.check_positive("n_children", n_children)
        return [
            Romu(self._variant, seed=child, streams=self._streams)
            for child in self._seed_seq.spawn(n_children)
        ]

    def __iter__(self) -> Iterator[Any]:
        while True:
            yield self.next_u64()

    def __repr__(self) -> str:
        streams = "" if self._streams is None else f", streams={self._streams}"
        return f"Romu({self._variant.name}{streams})"
