import numpy

from romu.helpers import MULTIPLIER, MULTIPLIER_INVERSE, WORD_BITS, rotl, rotr


def create_state_type(words):
    """
    Returns a structured ``numpy.dtype`` with a ``numpy.uint64`` field for each name in ``words``.
    """
    return numpy.dtype([(name, numpy.uint64) for name in words])


class Variant:
    """
    Contains a Romu state-advance function and accompanying metadata.

    .. py:attribute:: name

        The name of the generator, e.g. ``"romu_trio"``.

    .. py:attribute:: words

        A tuple with the names of the 64-bit state words, in the order
        the state is initialized from.

    .. py:attribute:: output_word

        The name of the word whose value before the step is returned by the step.

    .. py:attribute:: state_dtype

        The structured ``numpy.dtype`` of a single stream state,
        with a ``numpy.uint64`` field for each of :py:attr:`words`.

    .. py:attribute:: state_bits

        The size of the state in bits.

    .. py:attribute:: capacity

        The binary logarithm of the estimated capacity in bytes
        (the amount of output that can be used before statistical flaws become detectable).

    .. py:attribute:: register_pressure

        The number of registers the step uses in the reference C code.

    .. py:method:: step(state)

        Advances every stream in ``state`` (a one-dimensional array of :py:attr:`state_dtype`)
        in place and returns an array of ``numpy.uint64`` outputs, one per stream.

    .. py:method:: unstep(state)

        Replaces every stream in ``state`` with its predecessor, in place.
        Does not return anything.
    """

    def __init__(self, name, words, output_word, step, unstep, capacity, register_pressure):
        """__init__()""" # hide the signature from Sphinx
        self.name = name
        self.words = tuple(words)
        self.output_word = output_word
        self.state_dtype = create_state_type(self.words)
        self.state_bits = len(self.words) * WORD_BITS
        self.capacity = capacity
        self.register_pressure = register_pressure
        self.step = step
        self.unstep = unstep

    def __eq__(self, other):
        return isinstance(other, Variant) and self.name == other.name

    def __hash__(self):
        return hash((Variant, self.name))

    def __repr__(self):
        return f"Variant({self.name})"


def romu_duo_jr_step(state):
    xp = state["x"].copy()
    y = state["y"].copy()
    state["x"] = MULTIPLIER * y
    state["y"] = rotl(y - xp, 27)
    return xp


def romu_duo_jr_unstep(state):
    y = MULTIPLIER_INVERSE * state["x"]
    state["x"] = y - rotr(state["y"], 27)
    state["y"] = y


def romu_duo_step(state):
    xp = state["x"].copy()
    y = state["y"].copy()
    state["x"] = MULTIPLIER * y
    state["y"] = rotl(y, 36) + rotl(y, 15) - xp
    return xp


def romu_duo_unstep(state):
    y = MULTIPLIER_INVERSE * state["x"]
    state["x"] = rotl(y, 36) + rotl(y, 15) - state["y"]
    state["y"] = y


def romu_trio_step(state):
    xp = state["x"].copy()
    yp = state["y"].copy()
    zp = state["z"].copy()

    state["x"] = MULTIPLIER * zp
    state["y"] = rotl(yp - xp, 12)
    state["z"] = rotl(zp - yp, 44)

    return xp


def romu_trio_unstep(state):
    zp = MULTIPLIER_INVERSE * state["x"]
    yp = zp - rotr(state["z"], 44)
    xp = yp - rotr(state["y"], 12)

    state["x"] = xp
    state["y"] = yp
    state["z"] = zp


def romu_quad_step(state):
    wp = state["w"].copy()
    xp = state["x"].copy()
    yp = state["y"].copy()
    zp = state["z"].copy()

    state["w"] = MULTIPLIER * zp
    state["x"] = zp + rotl(wp, 52)
    state["y"] = yp - xp
    state["z"] = rotl(yp + wp, 19)

    return xp


def romu_quad_unstep(state):
    zp = MULTIPLIER_INVERSE * state["w"]
    wp = rotr(state["x"] - zp, 52)
    yp = rotr(state["z"], 19) - wp
    xp = yp - state["y"]

    state["w"] = wp
    state["x"] = xp
    state["y"] = yp
    state["z"] = zp


def romu_duo_jr():
    """
    An even faster version of :py:func:`romu_duo` with fewer registers,
    but yet again reduced capacity.
    Estimated capacity :math:`\\ge 2^{62}` bytes, state size 128 bits.

    :returns: a :py:class:`Variant` object.
    """
    return Variant(
        "romu_duo_jr", ("x", "y"), "x", romu_duo_jr_step, romu_duo_jr_unstep,
        capacity=62, register_pressure=7)


def romu_duo():
    """
    Faster than :py:func:`romu_trio` due to using fewer registers, but at reduced capacity.
    Estimated capacity :math:`2^{61}` bytes, state size 128 bits.

    :returns: a :py:class:`Variant` object.
    """
    return Variant(
        "romu_duo", ("x", "y"), "x", romu_duo_step, romu_duo_unstep,
        capacity=61, register_pressure=5)


def romu_trio():
    """
    A good general purpose generator for producing a lot of random numbers.
    Estimated capacity :math:`2^{75}` bytes, state size 192 bits.

    :returns: a :py:class:`Variant` object.
    """
    return Variant(
        "romu_trio", ("x", "y", "z"), "x", romu_trio_step, romu_trio_unstep,
        capacity=75, register_pressure=6)


def romu_quad():
    """
    A very robust generator with very high capacity, but also high register pressure.
    Intended for many parallel streams seeded independently.
    Estimated capacity :math:`\\ge 2^{90}` bytes, state size 256 bits.

    :returns: a :py:class:`Variant` object.
    """
    return Variant(
        "romu_quad", ("w", "x", "y", "z"), "x", romu_quad_step, romu_quad_unstep,
        capacity=90, register_pressure=8)


VARIANTS = {
    "romu_duo_jr": romu_duo_jr,
    "romu_duo": romu_duo,
    "romu_trio": romu_trio,
    "romu_quad": romu_quad,
}
