"""
This module provides the 3D primitives that rotations and poses act on.

* :class:`Vector3D` is a direction/displacement.
* :class:`Point3D` is a location.
* :class:`Size3D` is an extent with a width, height, and depth.

Each primitive stores its three components in a float64 numpy array and can be rotated, and have poses applied to it.
Arithmetic follows the usual affine rules: the difference of two points is a vector, a point plus a vector is a point,
and so on.  Operations that do not make sense (adding two points for instance) raise ``TypeError``.

Applying a pose to a primitive offsets it by the pose position *before* rotating it by the pose rotation (and then
scales it, for a :class:`.ScaledPose3D`)::

    >>> from spatial3d import Point3D, Pose3D, Rotation3D
    >>> pose = Pose3D(Point3D(1, 0, 0), Rotation3D.from_euler_angles([0, 0, 3.141592653589793]))
    >>> Point3D(1, 0, 0).applying(pose).is_approximately_equal(Point3D(-2, 0, 0))
    True
"""

import math
from numbers import Real
from typing import Any, Self, TYPE_CHECKING

import numpy as np

from spatial3d._typing import ARRAY_LIKE, DOUBLE_ARRAY
from spatial3d.rotations.core._helpers import _check_vector_array_and_shape
from spatial3d.rotations.core.quaternion_math import quaternion_act
from spatial3d.utilities.mixin_classes import AttributePrinting, PoseApplicable3D, Scalable3D, Translatable3D
from spatial3d.utilities.numerics import is_approximately_equal, is_almost_equal
from spatial3d.utilities.options import NumericOptions, DEFAULT_OPTIONS

if TYPE_CHECKING:
    from spatial3d.rotations.rotation import Rotation3D


__all__ = ['Primitive3D', 'Vector3D', 'Point3D', 'Size3D']


class Primitive3D(AttributePrinting, PoseApplicable3D):
    """
    The shared storage and behavior of the 3 component primitives.

    This class isn't intended to be used directly.  Use :class:`Vector3D`, :class:`Point3D`, or :class:`Size3D`.
    """

    _printed_attributes = ('x', 'y', 'z')

    # defer arithmetic with numpy scalars to the operators defined here
    __array_ufunc__ = None

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):

        self._vector: DOUBLE_ARRAY = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def from_vector(cls, vector: 'ARRAY_LIKE | Primitive3D') -> Self:
        """
        Creates the primitive from any 3 element array like, including another primitive.

        :param vector: The three components
        :return: The new primitive
        """

        vector = getattr(vector, 'vector', vector)

        x, y, z = _check_vector_array_and_shape(vector).ravel()

        return cls(x, y, z)

    @classmethod
    def zero(cls) -> Self:
        return cls()

    @classmethod
    def infinity(cls) -> Self:
        return cls(math.inf, math.inf, math.inf)

    @property
    def vector(self) -> DOUBLE_ARRAY:
        """
        The components as a numpy array.

        The returned array is the storage of this primitive, so modifying it modifies the primitive.
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

    @property
    def is_zero(self) -> bool:
        return not self._vector.any()

    @property
    def is_finite(self) -> bool:
        return bool(np.isfinite(self._vector).all())

    @property
    def is_nan(self) -> bool:
        return bool(np.isnan(self._vector).any())

    def to_vector(self) -> 'Vector3D':
        return Vector3D.from_vector(self._vector)

    def rotate_by_quaternion(self, quaternion: ARRAY_LIKE) -> None:
        self._vector = quaternion_act(quaternion, self._vector)

    def _offset(self, offset: 'Vector3D') -> None:
        self._vector = self._vector + offset.vector

    def _multiply(self, factor: float) -> None:
        self._vector = self._vector * factor

    def is_approximately_equal(self, other: Self, relative_tolerance: float | None = None,
                               absolute_tolerance: float | None = None,
                               options: NumericOptions = DEFAULT_OPTIONS) -> bool:
        """
        Checks whether two primitives of the same kind are approximately equal.

        The euclidean distance between the two is compared against the tolerances (see
        :func:`.is_approximately_equal`), so tiny components next to large ones do not need to match relatively.

        :param other: The primitive to compare to
        :param relative_tolerance: The relative tolerance (defaults to the one in `options`)
        :param absolute_tolerance: The absolute tolerance (defaults to the one in `options`)
        :param options: The numeric options to draw default tolerances from
        :return: True if the primitives are approximately equal
        """

        return is_approximately_equal(self._vector, other.vector,
                                      **options.tolerances(relative_tolerance, absolute_tolerance))

    def to_dict(self) -> dict[str, float]:
        return dict(zip(self._printed_attributes, self._vector.tolist()))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(*(data[key] for key in cls._printed_attributes))

    def __getitem__(self, index: int) -> float:
        return float(self._vector[index])

    def __setitem__(self, index: int, value: float):
        self._vector[index] = value

    def __len__(self) -> int:
        return 3

    def __iter__(self):
        return iter(self._vector.tolist())

    def __array__(self, dtype=None, copy=None) -> DOUBLE_ARRAY:
        return np.array(self._vector, dtype=dtype)

    def __eq__(self, other: Any) -> bool:

        if type(other) is not type(self):
            return NotImplemented

        return bool(np.array_equal(self._vector, other.vector))

    def __pos__(self) -> Self:
        return self.copy()

    def __neg__(self) -> Self:
        return self.from_vector(-self._vector)

    def __mul__(self, other: float) -> Self:

        if not isinstance(other, Real):
            return NotImplemented

        return self.from_vector(self._vector * other)

    def __rmul__(self, other: float) -> Self:
        return self.__mul__(other)

    def __imul__(self, other: float) -> Self:

        if not isinstance(other, Real):
            return NotImplemented

        self._vector *= other
        return self

    def __truediv__(self, other: float) -> Self:

        if not isinstance(other, Real):
            return NotImplemented

        return self.from_vector(self._vector / other)

    def __itruediv__(self, other: float) -> Self:

        if not isinstance(other, Real):
            return NotImplemented

        self._vector /= other
        return self


class Vector3D(Primitive3D, Scalable3D):
    """
    A three component vector.

    Vectors can be added to and subtracted from each other, from points (resulting in points), and from sizes (resulting
    in sizes).  They can be multiplied and divided by scalars.
    """

    @classmethod
    def forward(cls) -> Self:
        """
        The unit vector along +z
        """

        return cls(0, 0, 1)

    @classmethod
    def right(cls) -> Self:
        """
        The unit vector along +x
        """

        return cls(1, 0, 0)

    @classmethod
    def up(cls) -> Self:
        """
        The unit vector along +y
        """

        return cls(0, 1, 0)

    @property
    def length_squared(self) -> float:
        return float(self._vector @ self._vector)

    @property
    def length(self) -> float:
        return float(np.linalg.norm(self._vector))

    def normalize(self) -> None:
        """
        Scales the vector in place to unit length.

        The zero vector becomes all NaN.
        """

        self._vector = self._vector / self.length

    @property
    def normalized(self) -> 'Vector3D':
        out = self.copy()
        out.normalize()
        return out

    def dot(self, other: 'Vector3D') -> float:
        return float(self._vector @ other.vector)

    def cross(self, other: 'Vector3D') -> 'Vector3D':
        return Vector3D.from_vector(np.cross(self._vector, other.vector))

    def projected(self, other: 'Vector3D') -> 'Vector3D':
        """
        Returns the projection of this vector onto another vector.

        :param other: The vector to project onto (it need not be unit length)
        :return: The projected vector
        """

        return other * (self.dot(other) / other.length_squared)

    def reflected(self, normal: 'Vector3D') -> 'Vector3D':
        """
        Returns the reflection of this (incident) vector about a unit normal.

        :param normal: The unit normal of the reflecting surface
        :return: The reflected direction
        """

        return Vector3D.from_vector(self._vector - 2 * self.dot(normal) * normal.vector)

    def rotation_to(self, other: 'Vector3D') -> 'Rotation3D':
        """
        Returns the rotation about the origin that turns the direction of this vector into the direction of another.

        The rotation axis is the normalized cross product of the two vectors.  When the vectors are anti-parallel any
        axis perpendicular to this vector is used.

        :param other: The vector to rotate towards
        :return: The rotation
        """

        # import here to avoid a circular import
        from spatial3d.rotations.rotation import Rotation3D
        from spatial3d.angles import Angle
        from spatial3d.axes import RotationAxis3D

        cosine = self.dot(other) / (self.length * other.length)
        angle = math.acos(min(max(cosine, -1.0), 1.0))

        axis = self.cross(other)

        if axis.is_zero:
            # pick the coordinate axis least aligned with self to build a perpendicular
            helper = np.zeros(3)
            helper[np.argmin(np.abs(self._vector))] = 1
            axis = self.cross(Vector3D.from_vector(helper))

        return Rotation3D.from_angle_axis(Angle(angle), RotationAxis3D.from_vector(axis.normalized))

    def scale_by(self, x: float, y: float, z: float) -> None:

        assert math.isfinite(x) and math.isfinite(y) and math.isfinite(z), 'The scale factors must be finite'

        self._vector = self._vector * [x, y, z]

    def uniformly_scale(self, scale: float) -> None:

        assert math.isfinite(scale), 'The scale factor must be finite'

        self._vector = self._vector * scale

    def __add__(self, other: Any) -> Any:

        if isinstance(other, (Vector3D, Point3D, Size3D)):
            return type(other).from_vector(self._vector + other.vector)

        return NotImplemented

    def __radd__(self, other: Any) -> Any:

        if isinstance(other, (Point3D, Size3D)):
            return type(other).from_vector(other.vector + self._vector)

        return NotImplemented

    def __iadd__(self, other: 'Vector3D') -> Self:

        if not isinstance(other, Vector3D):
            return NotImplemented

        self._vector += other.vector
        return self

    def __sub__(self, other: Any) -> Any:

        if isinstance(other, (Vector3D, Point3D, Size3D)):
            return type(other).from_vector(self._vector - other.vector)

        return NotImplemented

    def __rsub__(self, other: Any) -> Any:

        if isinstance(other, (Point3D, Size3D)):
            return type(other).from_vector(other.vector - self._vector)

        return NotImplemented

    def __isub__(self, other: 'Vector3D') -> Self:

        if not isinstance(other, Vector3D):
            return NotImplemented

        self._vector -= other.vector
        return self


class Point3D(Primitive3D, Translatable3D):
    """
    A location in 3D space.

    The difference of two points is a :class:`Vector3D`.  Points can be offset by vectors and sizes but cannot be added
    to each other.
    """

    def distance_to(self, other: 'Point3D') -> float:
        return float(np.linalg.norm(self._vector - other.vector))

    def translate(self, by: Vector3D) -> None:

        assert by.is_finite, 'The translation must be finite'

        self._vector = self._vector + by.vector

    def rotate(self, by: 'Rotation3D | ARRAY_LIKE', around: 'Point3D | None' = None) -> None:
        """
        Rotates the point in place, optionally about a pivot point other than the origin.

        :param by: The rotation to apply, either as a :class:`.Rotation3D` or as a raw quaternion
        :param around: The pivot point (the origin if ``None``)
        """

        if around is None:
            super().rotate(by)
            return

        self._vector = self._vector - around.vector
        super().rotate(by)
        self._vector = self._vector + around.vector

    def rotated(self, by: 'Rotation3D | ARRAY_LIKE', around: 'Point3D | None' = None) -> Self:

        out = self.copy()
        out.rotate(by, around=around)
        return out

    def __add__(self, other: Any) -> Any:

        if isinstance(other, Size3D):
            return Point3D.from_vector(self._vector + other.vector)

        return NotImplemented

    def __radd__(self, other: Any) -> Any:

        if isinstance(other, Size3D):
            return Point3D.from_vector(other.vector + self._vector)

        return NotImplemented

    def __iadd__(self, other: Any) -> Self:

        if not isinstance(other, (Vector3D, Size3D)):
            return NotImplemented

        self._vector += other.vector
        return self

    def __sub__(self, other: Any) -> Any:

        if isinstance(other, Point3D):
            return Vector3D.from_vector(self._vector - other.vector)

        if isinstance(other, Size3D):
            return Point3D.from_vector(self._vector - other.vector)

        return NotImplemented

    def __rsub__(self, other: Any) -> Any:

        if isinstance(other, Size3D):
            return Point3D.from_vector(other.vector - self._vector)

        return NotImplemented

    def __isub__(self, other: Any) -> Self:

        if not isinstance(other, (Vector3D, Size3D)):
            return NotImplemented

        self._vector -= other.vector
        return self


class Size3D(Primitive3D, Scalable3D):
    """
    A 3D extent described by a width (x), height (y), and depth (z).

    Sizes can be added to and subtracted from each other and from vectors.
    """

    _printed_attributes = ('width', 'height', 'depth')

    def __init__(self, width: float = 0.0, height: float = 0.0, depth: float = 0.0):
        """
        :param width: The extent along x
        :param height: The extent along y
        :param depth: The extent along z
        """

        super().__init__(width, height, depth)

    @classmethod
    def one(cls) -> Self:
        return cls(1, 1, 1)

    @property
    def width(self) -> float:
        return self.x

    @width.setter
    def width(self, value: float):
        self.x = value

    @property
    def height(self) -> float:
        return self.y

    @height.setter
    def height(self, value: float):
        self.y = value

    @property
    def depth(self) -> float:
        return self.z

    @depth.setter
    def depth(self, value: float):
        self.z = value

    def rotate_by_quaternion(self, quaternion: ARRAY_LIKE) -> None:

        assert is_almost_equal(np.linalg.norm(quaternion), 1), 'Sizes can only be rotated by unit quaternions'

        super().rotate_by_quaternion(quaternion)

    def scale_by(self, x: float, y: float, z: float) -> None:

        assert math.isfinite(x) and math.isfinite(y) and math.isfinite(z), 'The scale factors must be finite'

        self._vector = self._vector * [x, y, z]

    def uniformly_scale(self, scale: float) -> None:

        assert math.isfinite(scale), 'The scale factor must be finite'

        self._vector = self._vector * scale

    def is_approximately_equal(self, other: 'Size3D', relative_tolerance: float | None = None,
                               absolute_tolerance: float | None = None,
                               options: NumericOptions = DEFAULT_OPTIONS) -> bool:
        """
        Checks whether each dimension of two sizes is almost equal.

        Unlike the other primitives, sizes are compared dimension by dimension using :func:`.is_almost_equal` with the
        relative tolerance, so every dimension must match relative to its own magnitude.  The absolute tolerance is not
        used.

        :param other: The size to compare to
        :param relative_tolerance: The tolerance (defaults to the relative tolerance in `options`)
        :param absolute_tolerance: Ignored for sizes
        :param options: The numeric options to draw the default tolerance from
        :return: True if every dimension is almost equal
        """

        tolerance = options.relative_tolerance if relative_tolerance is None else relative_tolerance

        return all(is_almost_equal(mine, theirs, tolerance) for mine, theirs in zip(self._vector, other.vector))

    def __add__(self, other: Any) -> Any:

        if isinstance(other, Size3D):
            return Size3D.from_vector(self._vector + other.vector)

        return NotImplemented

    def __iadd__(self, other: Any) -> Self:

        if not isinstance(other, (Size3D, Vector3D)):
            return NotImplemented

        self._vector += other.vector
        return self

    def __sub__(self, other: Any) -> Any:

        if isinstance(other, Size3D):
            return Size3D.from_vector(self._vector - other.vector)

        return NotImplemented

    def __isub__(self, other: Any) -> Self:

        if not isinstance(other, (Size3D, Vector3D)):
            return NotImplemented

        self._vector -= other.vector
        return self
