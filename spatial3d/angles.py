# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`Angle` class, a thin wrapper around an angle in radians.

The angle is never normalized automatically, so ``Angle(2*pi)`` and ``Angle(0)`` are different values (both for exact
and approximate equality).  Use :attr:`Angle.normalized` to reduce an angle into :math:`(-\\pi, \\pi]` before comparing
when that is what you mean.

The module level trigonometric helpers (:func:`cos`, :func:`sin`, ...) accept an :class:`Angle` directly::

    >>> from spatial3d.angles import Angle, cos
    >>> cos(Angle.from_degrees(180))
    -1.0
"""

import math
from typing import Any, Self

from spatial3d.utilities.mixin_classes import AttributePrinting, Copyable
from spatial3d.utilities.numerics import is_approximately_equal
from spatial3d.utilities.options import NumericOptions, DEFAULT_OPTIONS


__all__ = ['Angle', 'cos', 'sin', 'tan', 'cosh', 'sinh', 'tanh']


class Angle(AttributePrinting, Copyable):
    """
    An angle stored in radians.

    Angles support addition, subtraction, and negation with other angles.  In place variants (``+=``, ``-=``) modify the
    angle, while the binary operators return a new angle.  Angles are not ordered.
    """

    _printed_attributes = ('radians',)

    def __init__(self, radians: float = 0.0):
        """
        :param radians: The angle in radians
        """

        self.radians: float = float(radians)
        """
        The angle in radians
        """

    @classmethod
    def from_degrees(cls, degrees: float) -> Self:
        """
        Creates an angle from a value in degrees.

        :param degrees: The angle in degrees
        :return: The new angle
        """

        return cls(degrees * math.pi / 180)

    @classmethod
    def zero(cls) -> Self:
        return cls()

    @property
    def degrees(self) -> float:
        """
        The angle in degrees
        """

        return self.radians * 180 / math.pi

    @degrees.setter
    def degrees(self, value: float):
        self.radians = value * math.pi / 180

    # trigonometric values
    @property
    def cos(self) -> float:
        return math.cos(self.radians)

    @property
    def sin(self) -> float:
        return math.sin(self.radians)

    @property
    def tan(self) -> float:
        return math.tan(self.radians)

    @property
    def cosh(self) -> float:
        return math.cosh(self.radians)

    @property
    def sinh(self) -> float:
        return math.sinh(self.radians)

    @property
    def tanh(self) -> float:
        return math.tanh(self.radians)

    # inverse trigonometric constructors
    @classmethod
    def acos(cls, x: float) -> Self:
        return cls(math.acos(x))

    @classmethod
    def asin(cls, x: float) -> Self:
        return cls(math.asin(x))

    @classmethod
    def atan(cls, x: float) -> Self:
        return cls(math.atan(x))

    @classmethod
    def atan2(cls, y: float, x: float) -> Self:
        return cls(math.atan2(y, x))

    @classmethod
    def acosh(cls, x: float) -> Self:
        return cls(math.acosh(x))

    @classmethod
    def asinh(cls, x: float) -> Self:
        return cls(math.asinh(x))

    @classmethod
    def atanh(cls, x: float) -> Self:
        return cls(math.atanh(x))

    def normalize(self) -> None:
        r"""
        Reduces the angle in place into :math:`(-\pi, \pi]`.

        The result differs from the original angle by a multiple of :math:`2\pi`.
        """

        radians = math.remainder(self.radians, 2 * math.pi)

        # remainder rounds half way cases to even, which can land on -pi
        if radians <= -math.pi:
            radians += 2 * math.pi

        self.radians = radians

    @property
    def normalized(self) -> 'Angle':
        r"""
        A copy of the angle reduced into :math:`(-\pi, \pi]`
        """

        out = self.copy()
        out.normalize()
        return out

    def invert(self) -> None:
        """
        Turns the angle by half a revolution in place.

        Non-negative angles have :math:`\\pi` subtracted and negative angles have :math:`\\pi` added, so the result stays
        within half a revolution of zero when the input is normalized.
        """

        if self.radians >= 0:
            self.radians -= math.pi
        else:
            self.radians += math.pi

    @property
    def inverse(self) -> 'Angle':
        """
        A copy of the angle turned by half a revolution.  See :meth:`invert`.
        """

        out = self.copy()
        out.invert()
        return out

    def negate(self) -> None:
        self.radians = -self.radians

    @property
    def negated(self) -> 'Angle':
        return Angle(-self.radians)

    def rotate(self, by: 'Angle') -> None:
        """
        Adds another angle to this one in place.

        :param by: The angle to rotate by
        """

        self.radians += by.radians

    def rotated(self, by: 'Angle') -> 'Angle':
        return Angle(self.radians + by.radians)

    def flip(self, axis: str) -> None:
        """
        Mirrors a planar angle in place across the x or y axis.

        Flipping across x negates the angle.  Flipping across y reflects it to :math:`\\pi - \\theta`.

        :param axis: Either 'x' or 'y'
        :raises ValueError: if the axis is not x or y
        """

        fixed_axis = axis.lower()

        if fixed_axis == 'x':
            self.radians = -self.radians
        elif fixed_axis == 'y':
            self.radians = math.pi - self.radians
        else:
            raise ValueError('Angles can only be flipped along the x or y axis.  You entered {}'.format(axis))

    def flipped(self, axis: str) -> 'Angle':
        out = self.copy()
        out.flip(axis)
        return out

    def is_approximately_equal(self, other: 'Angle', relative_tolerance: float | None = None,
                               absolute_tolerance: float | None = None,
                               options: NumericOptions = DEFAULT_OPTIONS) -> bool:
        """
        Checks whether the radians of two angles are approximately equal.

        The angles are compared as is, without normalization.

        :param other: The angle to compare to
        :param relative_tolerance: The relative tolerance (defaults to the one in `options`)
        :param absolute_tolerance: The absolute tolerance (defaults to the one in `options`)
        :param options: The numeric options to draw default tolerances from
        :return: True if the angles are approximately equal
        """

        return is_approximately_equal(self.radians, other.radians,
                                      **options.tolerances(relative_tolerance, absolute_tolerance))

    def to_dict(self) -> dict[str, float]:
        return {'radians': self.radians}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(data['radians'])

    def __eq__(self, other: Any) -> bool:

        if not isinstance(other, Angle):
            return NotImplemented

        return self.radians == other.radians

    def __pos__(self) -> 'Angle':
        return self.copy()

    def __neg__(self) -> 'Angle':
        return self.negated

    def __add__(self, other: 'Angle') -> 'Angle':

        if not isinstance(other, Angle):
            return NotImplemented

        return Angle(self.radians + other.radians)

    def __sub__(self, other: 'Angle') -> 'Angle':

        if not isinstance(other, Angle):
            return NotImplemented

        return Angle(self.radians - other.radians)

    def __iadd__(self, other: 'Angle') -> Self:

        if not isinstance(other, Angle):
            return NotImplemented

        self.radians += other.radians
        return self

    def __isub__(self, other: 'Angle') -> Self:

        if not isinstance(other, Angle):
            return NotImplemented

        self.radians -= other.radians
        return self

    def __float__(self) -> float:
        return self.radians


def cos(angle: Angle) -> float:
    return angle.cos


def sin(angle: Angle) -> float:
    return angle.sin


def tan(angle: Angle) -> float:
    return angle.tan


def cosh(angle: Angle) -> float:
    return angle.cosh


def sinh(angle: Angle) -> float:
    return angle.sinh


def tanh(angle: Angle) -> float:
    return angle.tanh
