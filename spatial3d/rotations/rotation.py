"""
This module provides the :class:`Rotation3D` class along with the small types used to parameterize it.

Rotations are stored as quaternions ``[x, y, z, w]`` (vector part first, scalar part last).  Multiplying two rotations
composes them so that ``a * b`` applies ``b`` first and then ``a``::

    >>> from math import pi
    >>> from spatial3d import Rotation3D, Angle, RotationAxis3D
    >>> quarter = Rotation3D.from_angle_axis(Angle(pi / 2), RotationAxis3D.x_axis())
    >>> half = Rotation3D.from_angle_axis(Angle(pi), RotationAxis3D.x_axis())
    >>> (quarter * quarter).is_approximately_equal(half)
    True

Two kinds of equality are provided.  ``==`` compares the stored quaternions exactly, so a quaternion and its negation
(which describe the same rotation) are different.  :meth:`Rotation3D.is_approximately_equal` compares the rotations
themselves through the absolute value of the quaternion dot product, so the negated quaternion is approximately equal.
"""

from enum import Enum
from typing import Any, Self, cast

import numpy as np

from spatial3d._typing import ARRAY_LIKE, DOUBLE_ARRAY, F_ARRAY_LIKE
from spatial3d.angles import Angle
from spatial3d.axes import RotationAxis3D
from spatial3d.primitives import Vector3D, Point3D
from spatial3d.rotations.core._helpers import _check_quaternion_array_and_shape
from spatial3d.rotations.core.conversions import (quaternion_to_rotmat, quaternion_to_homogeneous,
                                                  rotmat_to_quaternion, quaternion_to_angle, quaternion_to_axis,
                                                  angle_axis_to_quaternion, euler_to_quaternion, quaternion_to_euler)
from spatial3d.rotations.core.quaternion_math import (IDENTITY_QUATERNION, quaternion_normalize, quaternion_inverse,
                                                      quaternion_conjugate, quaternion_multiplication, quaternion_dot,
                                                      quaternion_act, quaternion_twist, slerp, slerp_longest, spline)
from spatial3d.utilities.mixin_classes import AttributePrinting, Rotatable3D
from spatial3d.utilities.numerics import is_approximately_equal
from spatial3d.utilities.options import NumericOptions, DEFAULT_OPTIONS


__all__ = ['EulerOrder', 'EulerAngles', 'SlerpPath', 'Rotation3D']


class EulerOrder(Enum):
    """
    The supported Euler angle orders.

    For ``XYZ`` the roll, pitch, and yaw angles are rotations about x, y, and z.  For ``ZXY`` they are rotations about
    z, x, and y.
    """

    XYZ = 'xyz'
    ZXY = 'zxy'

    @classmethod
    def interpret(cls, order: 'EulerOrder | str') -> 'EulerOrder':
        """
        Returns the enum member for an order given either as a member or as its (case insensitive) name.

        :param order: The order
        :return: The member
        :raises ValueError: if the order is not supported
        """

        if isinstance(order, EulerOrder):
            return order

        return cls(order.lower())


class SlerpPath(Enum):
    """
    The arc that spherical linear interpolation follows.
    """

    AUTOMATIC = 'automatic'
    """
    Let the interpolation pick the arc.  This is currently the same as ``SHORTEST``.
    """

    SHORTEST = 'shortest'
    LONGEST = 'longest'


class EulerAngles(AttributePrinting):
    """
    Three angles (roll, pitch, yaw) in radians together with the order they apply in.
    """

    _printed_attributes = ('angles', 'order')

    def __init__(self, roll: float | Angle = 0.0, pitch: float | Angle = 0.0, yaw: float | Angle = 0.0,
                 order: EulerOrder | str = EulerOrder.XYZ):
        """
        :param roll: The first angle, in radians or as an :class:`.Angle`
        :param pitch: The second angle, in radians or as an :class:`.Angle`
        :param yaw: The third angle, in radians or as an :class:`.Angle`
        :param order: The order of the angles
        :raises ValueError: if the order is not supported
        """

        self.angles: DOUBLE_ARRAY = np.array([float(roll), float(pitch), float(yaw)])
        """
        The roll, pitch, and yaw angles in radians as a numpy array
        """

        self.order: EulerOrder = EulerOrder.interpret(order)
        """
        The order of the angles
        """

    @property
    def roll(self) -> Angle:
        return Angle(self.angles[0])

    @property
    def pitch(self) -> Angle:
        return Angle(self.angles[1])

    @property
    def yaw(self) -> Angle:
        return Angle(self.angles[2])

    def is_approximately_equal(self, other: 'EulerAngles', relative_tolerance: float | None = None,
                               absolute_tolerance: float | None = None,
                               options: NumericOptions = DEFAULT_OPTIONS) -> bool:
        """
        Checks that the orders match and the angle triples are approximately equal (compared as a vector).

        :param other: The angles to compare to
        :param relative_tolerance: The relative tolerance (defaults to the one in `options`)
        :param absolute_tolerance: The absolute tolerance (defaults to the one in `options`)
        :param options: The numeric options to draw default tolerances from
        :return: True if the angles are approximately equal
        """

        return self.order == other.order and is_approximately_equal(
            self.angles, other.angles, **options.tolerances(relative_tolerance, absolute_tolerance))

    def to_dict(self) -> dict[str, Any]:
        return {'angles': self.angles.tolist(), 'order': self.order.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(*data['angles'], order=data['order'])

    def __eq__(self, other: Any) -> bool:

        if not isinstance(other, EulerAngles):
            return NotImplemented

        return self.order == other.order and bool(np.array_equal(self.angles, other.angles))


class Rotation3D(AttributePrinting, Rotatable3D):
    """
    A rotation in 3D space backed by a quaternion.

    The constructor interprets its input by size in the same way for every representation: 4 elements are a quaternion
    (stored as given, without normalization), 9 elements are a 3x3 rotation matrix, and 16 elements are a 4x4
    homogeneous matrix whose upper left block is the rotation.  Nothing (or ``None``) gives the identity and another
    :class:`Rotation3D` is copied.  The named alternate constructors (:meth:`from_euler_angles`,
    :meth:`from_angle_axis`, :meth:`from_forward`, :meth:`looking_at`) cover the remaining representations.

    Rotations are mutable values.  :meth:`invert`, :meth:`normalize`, :meth:`rotate`, and ``*=`` change the rotation in
    place while the matching properties and operators (:attr:`inverse`, :attr:`normalized`, :meth:`rotated`, ``*``)
    return new rotations.

    Because the instances are mutable they are not hashable.
    """

    _printed_attributes = ('x', 'y', 'z', 'w')

    def __init__(self, data: 'ARRAY_LIKE | Rotation3D | None' = None):
        """
        :param data: The rotation data to initialize the class with
        :raises ValueError: If the size of the input data is not 4, 9, or 16
        """

        self._quaternion: DOUBLE_ARRAY = IDENTITY_QUATERNION.copy()

        if data is not None:
            self.interp_attitude(data)

    def interp_attitude(self, data: 'ARRAY_LIKE | Rotation3D') -> None:
        """
        This method interprets rotation data based on its shape and type.

        If the input is a :class:`Rotation3D` its quaternion is copied.  Otherwise the data is interpreted by its total
        size: 4 is a quaternion, 9 is a 3x3 rotation matrix, and 16 is a 4x4 homogeneous matrix.  Matrices are converted
        with :func:`.rotmat_to_quaternion` and normalized.

        :param data: The rotation data to be interpreted
        :raises ValueError: If the size of the input data is not 4, 9, or 16
        """

        if isinstance(data, Rotation3D):
            self.quaternion = data.quaternion
            return

        numpy_data = np.asarray(data, dtype=np.float64)

        if numpy_data.size == 4:
            self.quaternion = numpy_data

        elif numpy_data.size == 9:
            self.quaternion = quaternion_normalize(rotmat_to_quaternion(numpy_data.reshape(3, 3)))

        elif numpy_data.size == 16:
            self.quaternion = quaternion_normalize(rotmat_to_quaternion(numpy_data.reshape(4, 4)[:3, :3]))

        else:
            raise ValueError('The specified rotation data cannot be interpreted.')

    # alternate constructors
    @classmethod
    def identity(cls) -> Self:
        """
        The identity rotation, with quaternion ``[0, 0, 0, 1]``
        """

        return cls()

    @classmethod
    def from_quaternion(cls, quaternion: ARRAY_LIKE) -> Self:
        """
        Creates a rotation from a quaternion ``[x, y, z, w]``, stored without normalization.

        :param quaternion: The quaternion
        :return: The new rotation
        """

        out = cls()
        out.quaternion = quaternion
        return out

    @classmethod
    def from_matrix(cls, matrix: ARRAY_LIKE) -> Self:
        """
        Creates a rotation from a 3x3 rotation matrix or a 4x4 homogeneous matrix.

        :param matrix: The matrix
        :return: The new rotation
        :raises ValueError: if the matrix is not 3x3 or 4x4
        """

        shape = np.shape(matrix)

        if shape not in ((3, 3), (4, 4)):
            raise ValueError('The matrix must be 3x3 or 4x4.  You provided {}'.format(shape))

        return cls(matrix)

    @classmethod
    def from_euler_angles(cls, angles: 'EulerAngles | F_ARRAY_LIKE',
                          order: EulerOrder | str | None = None) -> Self:
        """
        Creates a rotation from roll, pitch, and yaw angles.

        See :func:`.euler_to_quaternion` for the formulation.

        :param angles: Either an :class:`EulerAngles` instance or the three angles in radians
        :param order: The order of the angles.  Required to be ``None`` or match when `angles` is an
                      :class:`EulerAngles`, defaults to xyz otherwise.
        :return: The new rotation
        :raises ValueError: if the order is not supported or contradicts the order of `angles`
        """

        if isinstance(angles, EulerAngles):
            if order is not None and EulerOrder.interpret(order) is not angles.order:
                raise ValueError('The order argument does not match the order of the provided EulerAngles')

            order = angles.order
            angles = angles.angles

        elif order is None:
            order = EulerOrder.XYZ

        return cls.from_quaternion(euler_to_quaternion(angles, EulerOrder.interpret(order).value))  # type: ignore

    @classmethod
    def from_angle_axis(cls, angle: Angle | float, axis: 'RotationAxis3D | ARRAY_LIKE') -> Self:
        """
        Creates a rotation of `angle` about `axis`.

        The axis is used as given and the resulting quaternion is normalized, so a non unit axis produces a valid rotation
        about the same axis by a different angle.  Pass a unit axis to get the requested angle.

        :param angle: The rotation angle
        :param axis: The rotation axis
        :return: The new rotation
        """

        axis_vector = axis.vector if isinstance(axis, RotationAxis3D) else axis

        return cls.from_quaternion(angle_axis_to_quaternion(float(angle), axis_vector))

    @classmethod
    def from_forward(cls, forward: Vector3D, up: Vector3D | None = None,
                     options: NumericOptions = DEFAULT_OPTIONS) -> Self:
        """
        Creates the rotation whose basis is built from a forward and an up direction.

        The side direction is ``forward x up`` and the corrected up direction is ``forward x side``.  The matrix with the
        columns ``(forward, corrected up, side)`` is converted to a quaternion and normalized.

        Both vectors must be unit length.

        :param forward: The unit forward direction
        :param up: The unit up direction (:meth:`.Vector3D.up` if ``None``)
        :param options: The numeric options used to check the lengths
        :return: The new rotation
        """

        if up is None:
            up = Vector3D.up()

        tolerances = options.tolerances()

        assert is_approximately_equal(forward.length, 1, **tolerances), \
            'Forward vector length is not 1: {}'.format(forward.length)
        assert is_approximately_equal(up.length, 1, **tolerances), 'Up vector length is not 1: {}'.format(up.length)

        side = forward.cross(up)
        corrected_up = forward.cross(side)

        matrix = np.column_stack([forward.vector, corrected_up.vector, side.vector])

        return cls.from_quaternion(quaternion_normalize(rotmat_to_quaternion(matrix)))

    @classmethod
    def looking_at(cls, target: Point3D, position: Point3D | None = None, up: Vector3D | None = None,
                   options: NumericOptions = DEFAULT_OPTIONS) -> Self:
        """
        Creates the rotation looking from `position` towards `target`.

        The direction from the position to the target is normalized and passed to :meth:`from_forward`.

        :param target: The point to look at
        :param position: The point to look from (the origin if ``None``)
        :param up: The unit up direction (:meth:`.Vector3D.up` if ``None``)
        :param options: The numeric options used to check the lengths
        :return: The new rotation
        """

        if position is None:
            position = Point3D.zero()

        forward = cast(Vector3D, target - position)

        return cls.from_forward(forward.normalized, up=up, options=options)

    # representations
    @property
    def quaternion(self) -> DOUBLE_ARRAY:
        """
        The quaternion ``[x, y, z, w]`` as a numpy array.

        This is the storage of the rotation, so modifying the array in place modifies the rotation.  Setting this
        property copies the input and does not normalize it.
        """

        return self._quaternion

    @quaternion.setter
    def quaternion(self, data: 'ARRAY_LIKE | Rotation3D'):

        if isinstance(data, Rotation3D):
            data = data.quaternion

        data = np.array(data, dtype=np.float64).ravel()

        if data.size != 4:
            raise ValueError('The quaternion must be length 4')

        self._quaternion = data

    @property
    def vector(self) -> DOUBLE_ARRAY:
        """
        A copy of the quaternion ``[x, y, z, w]``
        """

        return self._quaternion.copy()

    @property
    def x(self) -> float:
        return float(self._quaternion[0])

    @x.setter
    def x(self, value: float):
        self._quaternion[0] = value

    @property
    def y(self) -> float:
        return float(self._quaternion[1])

    @y.setter
    def y(self, value: float):
        self._quaternion[1] = value

    @property
    def z(self) -> float:
        return float(self._quaternion[2])

    @z.setter
    def z(self, value: float):
        self._quaternion[2] = value

    @property
    def w(self) -> float:
        return float(self._quaternion[3])

    @w.setter
    def w(self, value: float):
        self._quaternion[3] = value

    def __getitem__(self, index: int) -> float:
        return float(self._quaternion[index])

    def __setitem__(self, index: int, value: float):
        self._quaternion[index] = value

    def __len__(self) -> int:
        return 4

    @property
    def angle(self) -> Angle:
        """
        The angle of the rotation in :math:`[0, 2\\pi]`.

        Setting the angle keeps the current axis.
        """

        return Angle(quaternion_to_angle(self._quaternion))

    @angle.setter
    def angle(self, value: Angle | float):
        self._quaternion = angle_axis_to_quaternion(float(value), quaternion_to_axis(self._quaternion))

    @property
    def axis(self) -> RotationAxis3D:
        """
        The unit axis of the rotation.

        The identity rotation has no well defined axis and reports the zero axis.  Setting the axis keeps the current
        angle.
        """

        return RotationAxis3D.from_vector(quaternion_to_axis(self._quaternion))

    @axis.setter
    def axis(self, value: 'RotationAxis3D | ARRAY_LIKE'):

        axis_vector = value.vector if isinstance(value, RotationAxis3D) else value

        self._quaternion = angle_axis_to_quaternion(quaternion_to_angle(self._quaternion), axis_vector)

    @property
    def rotation_matrix(self) -> DOUBLE_ARRAY:
        """
        The 3x3 rotation matrix, which rotates column vectors
        """

        return quaternion_to_rotmat(self._quaternion)

    @property
    def matrix(self) -> DOUBLE_ARRAY:
        """
        The 4x4 homogeneous matrix with the rotation in the upper left block and no translation
        """

        return quaternion_to_homogeneous(self._quaternion)

    @property
    def valid(self) -> bool:
        """
        Whether the quaternion is (approximately) unit length, which is required for it to be a rotation
        """

        return is_approximately_equal(np.linalg.norm(self._quaternion), 1)

    @property
    def is_identity(self) -> bool:
        """
        Whether the quaternion is exactly ``[0, 0, 0, 1]``.

        The negated identity ``[0, 0, 0, -1]`` describes the same rotation but is not the identity quaternion, so this
        is False for it.  Use ``rotation.is_approximately_equal(Rotation3D.identity())`` to test the rotation instead.
        """

        return bool(np.array_equal(self._quaternion, IDENTITY_QUATERNION))

    # in place modification
    def invert(self) -> None:
        """
        Replaces the rotation with its inverse (conjugate over squared norm, see :func:`.quaternion_inverse`).
        """

        self._quaternion = quaternion_inverse(self._quaternion)

    @property
    def inverse(self) -> 'Rotation3D':
        """
        The inverse rotation as a new :class:`Rotation3D`
        """

        return Rotation3D.from_quaternion(quaternion_inverse(self._quaternion))

    def normalize(self) -> None:
        """
        Scales the quaternion in place to unit length.
        """

        self._quaternion = quaternion_normalize(self._quaternion)

    @property
    def normalized(self) -> 'Rotation3D':
        return Rotation3D.from_quaternion(quaternion_normalize(self._quaternion))

    @property
    def conjugate(self) -> 'Rotation3D':
        return Rotation3D.from_quaternion(quaternion_conjugate(self._quaternion))

    def rotate_by_quaternion(self, quaternion: ARRAY_LIKE) -> None:
        """
        Composes the rotation in place with a unit quaternion applied first: ``self = self * quaternion``.

        :param quaternion: The unit quaternion ``[x, y, z, w]``
        """

        quaternion = _check_quaternion_array_and_shape(quaternion)

        assert is_approximately_equal(np.linalg.norm(quaternion), 1), 'Rotations can only be rotated by unit quaternions'

        self._quaternion = quaternion_multiplication(self._quaternion, quaternion)

    # queries
    def dot(self, other: 'Rotation3D') -> float:
        """
        The 4 dimensional dot product of the two quaternions.

        :param other: The other rotation
        :return: The dot product
        """

        return quaternion_dot(self._quaternion, other.quaternion)

    def act(self, vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
        """
        Rotates a raw 3 element vector.

        :param vector: The vector to rotate
        :return: The rotated vector as a new numpy array
        """

        return quaternion_act(self._quaternion, vector)

    def euler_angles(self, order: EulerOrder | str = EulerOrder.XYZ,
                     options: NumericOptions = DEFAULT_OPTIONS) -> EulerAngles:
        """
        Returns the roll, pitch, and yaw angles of the rotation in the requested order.

        This is the inverse of :meth:`from_euler_angles` away from gimbal lock.  See :func:`.quaternion_to_euler` for
        the formulation.  When :attr:`.NumericOptions.clamp_euler_pitch` is set (the default) the pitch term is clamped
        so that rotations at gimbal lock produce a pitch of exactly :math:`\\pm\\pi/2` instead of NaN.

        :param order: The order of the angles
        :param options: The numeric options
        :return: The Euler angles
        :raises ValueError: if the order is not supported
        """

        order = EulerOrder.interpret(order)

        roll, pitch, yaw = quaternion_to_euler(self._quaternion, order.value,  # type: ignore
                                               clamp=options.clamp_euler_pitch)

        return EulerAngles(roll, pitch, yaw, order=order)

    def twist(self, twist_axis: 'RotationAxis3D | ARRAY_LIKE') -> 'Rotation3D':
        """
        Returns the twist component of the swing-twist decomposition about `twist_axis`.

        The vector part of the quaternion is projected onto the axis, recombined with the scalar part, and normalized,
        which isolates the portion of the rotation that occurs about the axis.  When the rotation has no component about
        the axis at all (a half turn about a perpendicular axis) the identity is returned.

        :param twist_axis: The axis to isolate rotation about.  It must not be the zero axis.
        :return: The twist rotation
        """

        axis_vector = twist_axis.vector if isinstance(twist_axis, RotationAxis3D) else twist_axis

        return Rotation3D.from_quaternion(quaternion_twist(self._quaternion, axis_vector))

    def _swing(self, twist: 'Rotation3D') -> 'Rotation3D':
        return Rotation3D.from_quaternion(quaternion_multiplication(self._quaternion,
                                                                    quaternion_conjugate(twist.quaternion)))

    def swing(self, twist_axis: 'RotationAxis3D | ARRAY_LIKE') -> 'Rotation3D':
        """
        Returns the swing component of the swing-twist decomposition about `twist_axis`.

        The swing is what is left after removing the twist, ``self * conjugate(twist)``.

        :param twist_axis: The twist axis
        :return: The swing rotation
        """

        return self._swing(self.twist(twist_axis))

    def swing_twist(self, twist_axis: 'RotationAxis3D | ARRAY_LIKE') -> tuple['Rotation3D', 'Rotation3D']:
        """
        Decomposes the rotation into swing and twist components about `twist_axis`.

        The decomposition satisfies ``swing * twist`` being approximately equal to the rotation.

        :param twist_axis: The twist axis
        :return: The (swing, twist) tuple
        """

        twist = self.twist(twist_axis)

        return self._swing(twist), twist

    def partial(self, t: float, options: NumericOptions = DEFAULT_OPTIONS) -> 'Rotation3D':
        """
        Returns a fraction of this rotation, the spherical interpolation from the identity to it at `t`.

        :param t: The fraction of the rotation (0 gives the identity and 1 gives this rotation)
        :param options: The numeric options
        :return: The partial rotation
        """

        return Rotation3D.slerp(Rotation3D.identity(), self, t, options=options)

    @staticmethod
    def slerp(start: 'Rotation3D', end: 'Rotation3D', t: float, path: SlerpPath | str = SlerpPath.AUTOMATIC,
              options: NumericOptions = DEFAULT_OPTIONS) -> 'Rotation3D':
        """
        Spherical linear interpolation between two rotations.

        The automatic and shortest paths take the short way around (see :func:`.slerp`) and the longest path takes the
        long way around (see :func:`.slerp_longest`).  At ``t=0`` the result is `start` and at ``t=1`` it is `end`, up
        to normalization and the sign of the quaternion.

        :param start: The rotation at ``t=0``
        :param end: The rotation at ``t=1``
        :param t: The interpolation parameter
        :param path: The arc to follow
        :param options: The numeric options, providing the threshold for falling back to linear interpolation
        :return: The interpolated rotation
        """

        path = SlerpPath(path.lower()) if isinstance(path, str) else path

        if path is SlerpPath.LONGEST:
            interpolator = slerp_longest
        else:
            interpolator = slerp

        return Rotation3D.from_quaternion(interpolator(start.quaternion, end.quaternion, t,
                                                       threshold=options.nlerp_threshold))

    @staticmethod
    def spline(left_endpoint: 'Rotation3D', start: 'Rotation3D', end: 'Rotation3D', right_endpoint: 'Rotation3D',
               t: float) -> 'Rotation3D':
        """
        Interpolates between `start` and `end` along a spherical cubic spline.

        The endpoints on either side shape the curve so that consecutive segments of a key frame sequence join smoothly.
        See :func:`.spline`.

        :param left_endpoint: The key rotation before `start`
        :param start: The rotation at ``t=0``
        :param end: The rotation at ``t=1``
        :param right_endpoint: The key rotation after `end`
        :param t: The interpolation parameter
        :return: The interpolated rotation
        """

        return Rotation3D.from_quaternion(spline(left_endpoint.quaternion, start.quaternion, end.quaternion,
                                                 right_endpoint.quaternion, t))

    def is_approximately_equal(self, other: 'Rotation3D', relative_tolerance: float | None = None,
                               absolute_tolerance: float | None = None,
                               options: NumericOptions = DEFAULT_OPTIONS) -> bool:
        """
        Checks whether two rotations are approximately the same rotation.

        This is true when the absolute value of the quaternion dot product is approximately 1, so ``q`` and ``-q`` are
        approximately equal.

        :param other: The rotation to compare to
        :param relative_tolerance: The relative tolerance (defaults to the one in `options`)
        :param absolute_tolerance: The absolute tolerance (defaults to the one in `options`)
        :param options: The numeric options to draw default tolerances from
        :return: True if the rotations are approximately equal
        """

        return is_approximately_equal(abs(self.dot(other)), 1,
                                      **options.tolerances(relative_tolerance, absolute_tolerance))

    def to_dict(self) -> dict[str, list[float]]:
        return {'quaternion': self._quaternion.tolist()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls.from_quaternion(data['quaternion'])

    def __eq__(self, other: Any) -> bool:

        if not isinstance(other, Rotation3D):
            return NotImplemented

        return bool(np.array_equal(self._quaternion, other.quaternion))

    def __neg__(self) -> 'Rotation3D':
        return Rotation3D.from_quaternion(-self._quaternion)

    def __mul__(self, other: Any) -> Any:

        if isinstance(other, Rotation3D):
            return Rotation3D.from_quaternion(quaternion_multiplication(self._quaternion, other.quaternion))

        if isinstance(other, Rotatable3D):
            return other.rotated(by=self)

        return NotImplemented

    def __imul__(self, other: 'Rotation3D') -> Self:

        if not isinstance(other, Rotation3D):
            return NotImplemented

        self._quaternion = quaternion_multiplication(self._quaternion, other.quaternion)
        return self

    def __array__(self, dtype=None, copy=None) -> DOUBLE_ARRAY:
        return np.array(self._quaternion, dtype=dtype)
