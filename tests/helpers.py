import numpy

from romu.seeding import state_words


def get_test_words(shape, no_zeros=False):
    """Returns an array of random ``numpy.uint64`` words."""
    rng = numpy.random.default_rng()
    low = 1 if no_zeros else 0
    return rng.integers(low, 2**64, shape, dtype=numpy.uint64, endpoint=False)


def get_test_state(variant, streams):
    """Returns a valid state array of ``variant`` with random words."""
    state = numpy.empty(streams, variant.state_dtype)
    for name in variant.words:
        state[name] = get_test_words(streams, no_zeros=True)
    return state


def stream_words(state, idx):
    """Returns the words of the stream ``idx`` of ``state`` as a tuple of Python integers."""
    return tuple(int(word) for word in state_words(state)[idx])
