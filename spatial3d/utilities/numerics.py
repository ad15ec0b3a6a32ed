"""
Floating point near-equality tests.

Two flavors are provided.  :func:`is_approximately_equal` follows the usual numerical analysis guidance of combining an
absolute and a relative tolerance and works on scalars as well as arrays (where the euclidean norm of the difference is
compared against the larger of the two norms).  :func:`is_almost_equal` is the stricter scalar test that scales the
tolerance by the magnitude of the inputs and treats infinities specially.

The default tolerance for both is the square root of machine epsilon, which corresponds to expecting about half the
digits of a computed result to be good.
"""

import math

import numpy as np

from spatial3d._typing import ARRAY_LIKE


__all__ = ['DEFAULT_TOLERANCE', 'is_approximately_equal', 'is_almost_equal', 'is_almost_zero']


DEFAULT_TOLERANCE: float = math.sqrt(np.finfo(np.float64).eps)
"""
The square root of machine epsilon for double precision
"""

_LEAST_NORMAL: float = float(np.finfo(np.float64).tiny)


def is_approximately_equal(value: ARRAY_LIKE, other: ARRAY_LIKE,
                           absolute_tolerance: float | None = None,
                           relative_tolerance: float = DEFAULT_TOLERANCE) -> bool:
    r"""
    Test if two values are approximately equal.

    The values are equal if they are identical, or if they are finite and

    .. math::
        \|a - b\| \le \max(\tau_a, \tau_r\max(\|a\|, \|b\|))

    where :math:`\tau_a` is the absolute tolerance and :math:`\tau_r` is the relative tolerance.  When no absolute
    tolerance is given it defaults to the relative tolerance times the smallest normal double, which makes the test
    purely relative.

    This comparison is symmetric but is not transitive, so it must not be used to implement ``__eq__``.

    :param value: The first scalar or array
    :param other: The second scalar or array (same shape as `value`)
    :param absolute_tolerance: The absolute tolerance
    :param relative_tolerance: The relative tolerance, which should be in [0, 1]
    :return: True if the values are approximately equal
    """

    assert 0 <= relative_tolerance <= 1, 'The relative tolerance must be in [0, 1]'

    if absolute_tolerance is None:
        absolute_tolerance = relative_tolerance * _LEAST_NORMAL

    assert absolute_tolerance >= 0 and math.isfinite(absolute_tolerance), \
        'The absolute tolerance must be non-negative and finite'

    first = np.asarray(value, dtype=np.float64)
    second = np.asarray(other, dtype=np.float64)

    if np.array_equal(first, second):
        return True

    delta = float(np.linalg.norm(first - second))
    scale = max(float(np.linalg.norm(first)), float(np.linalg.norm(second)))

    return math.isfinite(delta) and delta <= max(absolute_tolerance, scale * relative_tolerance)


def _rescaled_almost_equal(value: float, other: float, tolerance: float) -> bool:
    """
    Handles the comparison of values where at least one is not finite.
    """

    if math.isnan(value) or math.isnan(other):
        return False

    if math.isinf(value):
        if math.isinf(other):
            return value == other

        # bring both values down by a factor of two so that the infinite one becomes the largest finite power of two
        scaled_value = math.copysign(2.0 ** 1023, value)
        scaled_other = other / 2

        return is_almost_equal(scaled_value, scaled_other, tolerance)

    return _rescaled_almost_equal(other, value, tolerance)


def is_almost_equal(value: float, other: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """
    Test if two scalars are almost equal relative to their magnitude.

    For finite values this is ``abs(value - other) < max(abs(value), abs(other), tiny) * tolerance``.  NaN is never
    almost equal to anything, and infinities are only almost equal to themselves.

    :param value: The first value
    :param other: The second value
    :param tolerance: The relative tolerance, which must be in [eps, 1)
    :return: True if the values are almost equal
    """

    assert np.finfo(np.float64).eps <= tolerance < 1, 'tolerance should be in [eps, 1).'

    value = float(value)
    other = float(other)

    if not (math.isfinite(value) and math.isfinite(other)):
        return _rescaled_almost_equal(value, other, tolerance)

    scale = max(abs(value), abs(other), _LEAST_NORMAL)

    return abs(value - other) < scale * tolerance


def is_almost_zero(value: float, absolute_tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """
    Test if a scalar is within an absolute tolerance of zero.

    :param value: The value to check
    :param absolute_tolerance: The tolerance, which must be positive
    :return: True if ``abs(value) < absolute_tolerance``
    """

    assert absolute_tolerance > 0, 'The absolute tolerance must be positive'

    return abs(float(value)) < absolute_tolerance
