"""
This package implements the Romu family of fast nonlinear pseudo-random number generators
by Mark Overton, described in the `paper <http://www.romu-random.org/romupaper.pdf>`_
and the `reference code <http://www.romu-random.org/code.c>`_.

A Romu generator keeps a state of two to four 64-bit words.
Every step multiplies one word by the constant :py:data:`~romu.helpers.MULTIPLIER`,
and updates the others by subtraction, addition and bit rotation.
Rotation is the nonlinear component which prevents the sequence from being solved
as a linear recurrence.
The value returned by a step is the value of the output word *before* the step.

There are four generators available:
``romu_duo_jr`` (128-bit state, fastest, lowest capacity), ``romu_duo`` (128-bit state),
``romu_trio`` (192-bit state, a good general purpose choice)
and ``romu_quad`` (256-bit state, highest capacity,
intended for many independently seeded parallel streams).

The all-zero state is a fixed point of every step and therefore can never be used;
the seeding procedure guarantees it does not occur.

Every step is invertible: given a state, the previous one can be computed
(see :py:meth:`~romu.Romu.rewind`).
Consequently, Romu generators are not cryptographically secure and must not be used
where an adversary can benefit from predicting or reversing their output.

The :py:class:`~romu.Romu` class returns raw 64-bit outputs only;
conversion into bounded integers or floating point values is left to the caller.


.. autoclass:: Romu
    :members:


Generators
^^^^^^^^^^

.. automodule:: romu.variants
    :members:

.. automodule:: romu.seeding
    :members:

.. automodule:: romu.helpers
    :members:
"""

from romu.generator import Romu
from romu.helpers import MULTIPLIER, rotl, rotr
from romu.variants import VARIANTS, Variant, romu_duo, romu_duo_jr, romu_quad, romu_trio
from romu.version import VERSION
