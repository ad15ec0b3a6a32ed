"""
This module provides the axis types used to parameterize rotations and flips.

:class:`Axis3D` selects one of the coordinate axes (used by :meth:`.Pose3D.flip`).  :class:`RotationAxis3D` is a free
3 element direction used to build angle/axis rotations and to decompose rotations into swing and twist.  Rotation axes
are not normalized, and the zero axis is a degenerate value that rotation construction does not guard against.
"""

from enum import Enum
from typing import Any, Self

import numpy as np

from spatial3d._typing import ARRAY_LIKE, DOUBLE_ARRAY
from spatial3d.rotations.core._helpers import _check_vector_array_and_shape
from spatial3d.utilities.mixin_classes import AttributePrinting, Copyable
from spatial3d.utilities.numerics import is_approximately_equal
from spatial3d.utilities.options import NumericOptions, DEFAULT_OPTIONS


__all__ = ['Axis3D', 'RotationAxis3D']


class Axis3D(Enum):
    """
    The coordinate axes.
    """

    X = 'x'
    Y = 'y'
    Z = 'z'

    @classmethod
    def interpret(cls, axis: 'Axis3D | str') -> 'Axis3D':
        """
        Returns the enum member for an axis given either as a member or as its (case insensitive) name.

        :param axis: The axis
        :return: The member
        :raises ValueError: if the axis is not x, y, or z
        """

        if isinstance(axis, Axis3D):
            return axis

        return cls(axis.lower())

    @property
    def index(self) -> int:
        return 'xyz'.index(self.value)


class RotationAxis3D(AttributePrinting, Copyable):
    """
    A 3 component direction about which a rotation occurs.

    The components are stored as a float64 numpy array in :attr:`vector`.  No unit length is enforced; callers that build
    rotations from an axis should provide a unit axis.
    """

    _printed_attributes = ('x', 'y', 'z')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        """
        :param x: The x component
        :param y: The y component
        :param z: The z component
        """

        self._vector: DOUBLE_ARRAY = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def from_vector(cls, vector: 'ARRAY_LIKE | RotationAxis3D') -> Self:
        """
        Creates an axis from any 3 element array like (including :class:`.Vector3D` and another axis).

        :param vector: The components of the axis
        :return: The new axis
        """

        vector = getattr(vector, 'vector', vector)

        x, y, z = _check_vector_array_and_shape(vector).ravel()

        return cls(x, y, z)

    @classmethod
    def x_axis(cls) -> Self:
        return cls(x=1)

    @classmethod
    def y_axis(cls) -> Self:
        return cls(y=1)

    @classmethod
    def z_axis(cls) -> Self:
        return cls(z=1)

    @classmethod
    def xy_axis(cls) -> Self:
        return cls(x=1, y=1)

    @classmethod
    def yz_axis(cls) -> Self:
        return cls(y=1, z=1)

    @classmethod
    def xz_axis(cls) -> Self:
        return cls(x=1, z=1)

    @classmethod
    def xyz_axis(cls) -> Self:
        return cls(1, 1, 1)

    @classmethod
    def zero(cls) -> Self:
        return cls()

    @property
    def vector(self) -> DOUBLE_ARRAY:
        """
        The components of the axis as a numpy array.

        The returned array is the storage of this axis, so modifying it modifies the axis.
        """

        return self._vector

    @vector.setter
    def vector(self, value: ARRAY_LIKE):
        self._vector = _check_vector_array_and_shape(value, return_copy=True).ravel()

    @property
    def x(self) -> float:
        return float(self._vector[0])

    @x.setter
    def x(self, value: float):
        self._vector[0] = value

    @property
    def y(self) -> float:
        return float(self._vector[1])

    @y.setter
    def y(self, value: float):
        self._vector[1] = value

    @property
    def z(self) -> float:
        return float(self._vector[2])

    @z.setter
    def z(self, value: float):
        self._vector[2] = value

    def __getitem__(self, index: int) -> float:
        return float(self._vector[index])

    def __setitem__(self, index: int, value: float):
        self._vector[index] = value

    def __len__(self) -> int:
        return 3

    def __array__(self, dtype=None, copy=None) -> DOUBLE_ARRAY:
        return np.array(self._vector, dtype=dtype)

    def is_approximately_equal(self, other: 'RotationAxis3D', relative_tolerance: float | None = None,
                               absolute_tolerance: float | None = None,
                               options: NumericOptions = DEFAULT_OPTIONS) -> bool:
        """
        Checks whether each component of two axes is approximately equal.

        :param other: The axis to compare to
        :param relative_tolerance: The relative tolerance (defaults to the one in `options`)
        :param absolute_tolerance: The absolute tolerance (defaults to the one in `options`)
        :param options: The numeric options to draw default tolerances from
        :return: True if every component is approximately equal
        """

        tolerances = options.tolerances(relative_tolerance, absolute_tolerance)

        return all(is_approximately_equal(mine, theirs, **tolerances)
                   for mine, theirs in zip(self._vector, other.vector))

    def to_dict(self) -> dict[str, list[float]]:
        return {'vector': self._vector.tolist()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls.from_vector(data['vector'])

    def __eq__(self, other: Any) -> bool:

        if not isinstance(other, RotationAxis3D):
            return NotImplemented

        return bool(np.array_equal(self._vector, other.vector))
