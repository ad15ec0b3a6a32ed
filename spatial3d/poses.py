# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the pose classes, :class:`Pose3D` (a position and a rotation) and :class:`ScaledPose3D` (a
position, a rotation, and a uniform scale).

The composition rules here are intentionally simpler than conventional rigid transform algebra and must be kept as
they are:

* Concatenating poses (``lhs * rhs``) adds the positions directly, *without* rotating ``rhs.position`` by
  ``lhs.rotation``, and multiplies the rotations (``lhs.rotation * rhs.rotation``).  Scales multiply.
* Applying a pose to a primitive offsets the primitive by the position *first* and then rotates it (and then scales
  it for a :class:`ScaledPose3D`).
* Inverting a pose negates the position, inverts the rotation, and reciprocates the scale.  This is not the inverse
  of the conventional rigid transform, but it is the inverse with respect to the composition rule above.

For example, composing a half turn about z with a pure translation keeps the translation unrotated::

    >>> from math import pi
    >>> from spatial3d import Pose3D, Point3D, Rotation3D, Angle, RotationAxis3D
    >>> half_turn = Pose3D(rotation=Rotation3D.from_angle_axis(Angle(pi), RotationAxis3D.z_axis()))
    >>> shift = Pose3D(Point3D(1, 2, 0))
    >>> (half_turn * shift).position
    Point3D(x=1.0, y=2.0, z=0.0)
"""

import logging
import math
import warnings
from typing import Any, Self

import numpy as np

from spatial3d._typing import ARRAY_LIKE, DOUBLE_ARRAY
from spatial3d.axes import Axis3D
from spatial3d.primitives import Point3D, Vector3D
from spatial3d.rotations.core.conversions import homogeneous_scale, quaternion_to_homogeneous, rotmat_to_quaternion
from spatial3d.rotations.core.elementals import reflection_matrix
from spatial3d.rotations.rotation import Rotation3D
from spatial3d.utilities.mixin_classes import AttributePrinting, PoseApplicable3D, Rotatable3D, Translatable3D
from spatial3d.utilities.numerics import DEFAULT_TOLERANCE, is_almost_equal
from spatial3d.utilities.options import NumericOptions, DEFAULT_OPTIONS


__all__ = ['Pose3D', 'ScaledPose3D']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
The logging utility for reporting information in this module
"""

_LEAST_NORMAL: float = float(np.finfo(np.float64).tiny)


def _matrix_components(matrix: ARRAY_LIKE) -> tuple[Point3D, Rotation3D, float] | None:
    """
    Splits a 4x4 homogeneous matrix into a position, a rotation, and a uniform scale.

    ``None`` is returned when the upper left 3x3 block does not encode a usable uniform scale (the column lengths differ
    or the common length is zero, subnormal, or not finite).
    """

    matrix = np.asarray(matrix, dtype=np.float64)

    if matrix.shape != (4, 4):
        raise ValueError('Poses can only be built from 4x4 matrices.  You provided {}'.format(matrix.shape))

    scale = homogeneous_scale(matrix)

    if not (math.isfinite(scale) and abs(scale) >= _LEAST_NORMAL):
        _LOGGER.debug('The matrix does not have a normal uniform scale ({}).  No pose can be built'.format(scale))
        return None

    return Point3D.from_vector(matrix[:3, 3]), Rotation3D.from_matrix(matrix[:3, :3] / scale), scale


class _BasePose3D(AttributePrinting, Rotatable3D, Translatable3D):
    """
    The storage and behavior shared by :class:`Pose3D` and :class:`ScaledPose3D`.

    This class isn't intended to be used directly.
    """

    _printed_attributes: tuple[str, ...] = ('position', 'rotation')

    def __init__(self, position: Point3D | ARRAY_LIKE | None = None, rotation: Rotation3D | ARRAY_LIKE | None = None):
        """
        :param position: The position of the pose.  The origin if ``None``.  The input is copied.
        :param rotation: The rotation of the pose (anything :class:`.Rotation3D` accepts).  The identity if ``None``.
                         The input is copied.
        """

        self.position: Point3D = Point3D() if position is None else Point3D.from_vector(position)
        """
        The position of the pose
        """

        self.rotation: Rotation3D = Rotation3D(rotation)
        """
        The rotation of the pose
        """

    @classmethod
    def identity(cls) -> Self:
        """
        The identity pose (origin position and identity rotation, plus unit scale for a :class:`ScaledPose3D`).
        """

        return cls()

    @classmethod
    def from_forward(cls, forward: Vector3D, up: Vector3D | None = None, position: Point3D | None = None,
                     options: NumericOptions = DEFAULT_OPTIONS) -> Self:
        """
        Creates a pose whose rotation is built from a unit forward and up direction by :meth:`.Rotation3D.from_forward`.

        :param forward: The unit forward direction
        :param up: The unit up direction (:meth:`.Vector3D.up` if ``None``)
        :param position: The position of the pose (the origin if ``None``)
        :param options: The numeric options used to check the lengths
        :return: The new pose
        """

        return cls(position, Rotation3D.from_forward(forward, up=up, options=options))

    @classmethod
    def looking_at(cls, target: Point3D, position: Point3D | None = None, up: Vector3D | None = None,
                   options: NumericOptions = DEFAULT_OPTIONS) -> Self:
        """
        Creates a pose located at `position` and rotated to look at `target`.

        :param target: The point to look at
        :param position: The position of the pose (the origin if ``None``)
        :param up: The unit up direction (:meth:`.Vector3D.up` if ``None``)
        :param options: The numeric options used to check the lengths
        :return: The new pose
        """

        if position is None:
            position = Point3D.zero()

        return cls(position, Rotation3D.looking_at(target, position=position, up=up, options=options))

    @property
    def matrix(self) -> DOUBLE_ARRAY:
        """
        The 4x4 homogeneous matrix with the rotation in the upper left block and the position in the last column.

        Scale is not included.
        """

        return quaternion_to_homogeneous(self.rotation.quaternion, self.position.vector)

    def invert(self) -> None:
        """
        Replaces the pose with its inverse in place: the position is negated and the rotation is inverted.
        """

        self.position = -self.position
        self.rotation.invert()

    @property
    def inverse(self) -> Self:
        """
        The inverse of the pose as a new pose.  See :meth:`invert`.
        """

        out = self.copy()
        out.invert()
        return out

    def flip(self, axis: Axis3D | str) -> None:
        """
        Mirrors the pose in place along one of the coordinate axes.

        The position component along `axis` is negated and the rotation matrix is multiplied on the right by the
        reflection matrix for the axis (see :func:`.reflection_matrix`).  The resulting quaternion is not normalized.

        :param axis: The axis to flip along
        :raises ValueError: if the axis is not x, y, or z
        """

        axis = Axis3D.interpret(axis)

        self.position[axis.index] = -self.position[axis.index]

        flipped = self.rotation.rotation_matrix @ reflection_matrix(axis.value)

        self.rotation = Rotation3D.from_quaternion(rotmat_to_quaternion(flipped))

    def flipped(self, axis: Axis3D | str) -> Self:
        out = self.copy()
        out.flip(axis)
        return out

    def translate(self, by: Vector3D) -> None:
        self.position.translate(by)

    def rotate_by_quaternion(self, quaternion: ARRAY_LIKE) -> None:
        self.rotation.rotate_by_quaternion(quaternion)

    def _concatenate(self, other: '_BasePose3D') -> None:
        self.position = Point3D.from_vector(self.position.vector + other.position.vector)
        self.rotation *= other.rotation

    def __neg__(self) -> Self:
        return self.inverse

    def __eq__(self, other: Any) -> bool:

        if type(other) is not type(self):
            return NotImplemented

        return self.position == other.position and self.rotation == other.rotation


class Pose3D(_BasePose3D):
    """
    A position and a rotation.

    Poses are mutable.  :meth:`invert`, :meth:`flip`, :meth:`rotate`, :meth:`translate` and ``*=`` modify the pose in
    place while :attr:`inverse`, :meth:`flipped`, :meth:`rotated`, :meth:`translated` and ``*`` return new poses.

    Multiplying a pose by a primitive (a :class:`.Vector3D`, :class:`.Point3D` or :class:`.Size3D`) applies the pose
    to a copy of the primitive (see :meth:`.PoseApplicable3D.apply`).
    """

    @classmethod
    def from_matrix(cls, matrix: ARRAY_LIKE) -> Self | None:
        """
        Creates a pose from a 4x4 homogeneous matrix.

        The position is the last column.  The rotation is the upper left 3x3 block divided by its uniform scale, which
        is otherwise discarded.  If the block does not have a usable uniform scale ``None`` is returned.

        :param matrix: The 4x4 matrix
        :return: The new pose or ``None``
        :raises ValueError: if the matrix is not 4x4
        """

        components = _matrix_components(matrix)

        if components is None:
            return None

        position, rotation, _ = components

        return cls(position, rotation)

    @classmethod
    def from_scaled_pose(cls, scaled_pose: 'ScaledPose3D') -> Self:
        """
        Creates a pose with the position and rotation of a scaled pose, dropping the scale.

        :param scaled_pose: The scaled pose
        :return: The new pose
        """

        return cls(scaled_pose.position, scaled_pose.rotation)

    @property
    def is_identity(self) -> bool:
        """
        Whether the position is exactly zero and the rotation is exactly the identity quaternion
        """

        return self.position.is_zero and self.rotation.is_identity

    def concatenating(self, other: 'Pose3D | ScaledPose3D') -> 'Pose3D | ScaledPose3D':
        """
        Returns the concatenation of this pose with another pose.

        Concatenating with a :class:`ScaledPose3D` gives ``other * ScaledPose3D.from_pose(self)``, a scaled pose.

        :param other: The pose to concatenate
        :return: The concatenated pose
        :raises TypeError: if `other` is not a pose
        """

        if isinstance(other, ScaledPose3D):
            return other * ScaledPose3D.from_pose(self)

        if isinstance(other, Pose3D):
            return self * other

        raise TypeError('Poses can only be concatenated with other poses.  You provided {}'.format(
            type(other).__name__))

    def is_approximately_equal(self, other: 'Pose3D', tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """
        Checks whether two poses are approximately equal.

        The positions are compared with :meth:`.Point3D.is_approximately_equal` and the rotations with
        :meth:`.Rotation3D.is_approximately_equal`, both using `tolerance` as the relative tolerance.

        :param other: The pose to compare to
        :param tolerance: The relative tolerance
        :return: True if the poses are approximately equal
        """

        return (self.position.is_approximately_equal(other.position, relative_tolerance=tolerance) and
                self.rotation.is_approximately_equal(other.rotation, relative_tolerance=tolerance))

    def to_dict(self) -> dict[str, Any]:
        return {'position': self.position.to_dict(), 'rotation': self.rotation.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(Point3D.from_dict(data['position']), Rotation3D.from_dict(data['rotation']))

    def __mul__(self, other: Any) -> Any:

        if type(other) is Pose3D:
            out = self.copy()
            out._concatenate(other)
            return out

        if isinstance(other, PoseApplicable3D):
            return other.applying(self)

        return NotImplemented

    def __imul__(self, other: 'Pose3D') -> Self:

        if type(other) is not Pose3D:
            return NotImplemented

        self._concatenate(other)
        return self


class ScaledPose3D(_BasePose3D):
    """
    A position, a rotation, and a uniform scale.

    This behaves like :class:`Pose3D` with the scale carried along: concatenation multiplies the scales, inversion
    reciprocates the scale, and applying the pose to a primitive multiplies the primitive by the scale after it has been
    offset and rotated.
    """

    _printed_attributes = ('position', 'rotation', 'scale')

    def __init__(self, position: Point3D | ARRAY_LIKE | None = None, rotation: Rotation3D | ARRAY_LIKE | None = None,
                 scale: float = 1.0):
        """
        :param position: The position of the pose.  The origin if ``None``.  The input is copied.
        :param rotation: The rotation of the pose (anything :class:`.Rotation3D` accepts).  The identity if ``None``.
                         The input is copied.
        :param scale: The uniform scale of the pose
        """

        super().__init__(position, rotation)

        self.scale: float = float(scale)
        """
        The uniform scale of the pose
        """

    @classmethod
    def from_matrix(cls, matrix: ARRAY_LIKE) -> Self | None:
        """
        Creates a scaled pose from a 4x4 homogeneous matrix.

        The position is the last column, the scale is the common length of the first three columns (see
        :func:`.homogeneous_scale`), and the rotation is the upper left 3x3 block divided by the scale.  If the block
        does not have a usable uniform scale ``None`` is returned.

        :param matrix: The 4x4 matrix
        :return: The new scaled pose or ``None``
        :raises ValueError: if the matrix is not 4x4
        """

        components = _matrix_components(matrix)

        if components is None:
            return None

        return cls(*components)

    @classmethod
    def from_pose(cls, pose: Pose3D, scale: float = 1.0) -> Self:
        """
        Creates a scaled pose with the position and rotation of a pose.

        :param pose: The pose
        :param scale: The scale to use
        :return: The new scaled pose
        """

        return cls(pose.position, pose.rotation, scale)

    @property
    def is_identity(self) -> bool:
        """
        Whether the position is exactly zero, the rotation is exactly the identity quaternion, and the scale is almost 1
        """

        return self.position.is_zero and self.rotation.is_identity and is_almost_equal(self.scale, 1)

    def invert(self) -> None:
        """
        Replaces the pose with its inverse in place: the position is negated, the rotation is inverted, and the scale is
        reciprocated.

        Inverting a zero scale issues a ``RuntimeWarning`` and produces an infinite scale.
        """

        super().invert()

        if self.scale == 0:
            warnings.warn('Inverting a scaled pose with a zero scale.  The inverse scale is infinite', RuntimeWarning)
            self.scale = math.copysign(math.inf, self.scale)
        else:
            self.scale = 1 / self.scale

    def uniformly_scale(self, scale: float) -> None:
        """
        Multiplies the scale of the pose in place.

        :param scale: The factor to multiply the scale by
        """

        self.scale *= scale

    def uniformly_scaled(self, scale: float) -> 'ScaledPose3D':
        out = self.copy()
        out.uniformly_scale(scale)
        return out

    def concatenating(self, other: 'Pose3D | ScaledPose3D') -> 'ScaledPose3D':
        """
        Returns the concatenation of this scaled pose with another pose.

        A :class:`Pose3D` is promoted to a scaled pose with unit scale first.

        :param other: The pose to concatenate
        :return: The concatenated scaled pose
        :raises TypeError: if `other` is not a pose
        """

        if isinstance(other, ScaledPose3D):
            return self * other

        if isinstance(other, Pose3D):
            return self * ScaledPose3D.from_pose(other)

        raise TypeError('Poses can only be concatenated with other poses.  You provided {}'.format(
            type(other).__name__))

    def is_approximately_equal(self, other: 'ScaledPose3D', tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """
        Checks whether two scaled poses are approximately equal.

        The positions and rotations are compared as in :meth:`Pose3D.is_approximately_equal` and the scales with
        :func:`.is_almost_equal`, all using `tolerance`.

        :param other: The scaled pose to compare to
        :param tolerance: The relative tolerance
        :return: True if the scaled poses are approximately equal
        """

        return (self.position.is_approximately_equal(other.position, relative_tolerance=tolerance) and
                self.rotation.is_approximately_equal(other.rotation, relative_tolerance=tolerance) and
                is_almost_equal(self.scale, other.scale, tolerance))

    def to_dict(self) -> dict[str, Any]:
        return {'position': self.position.to_dict(), 'rotation': self.rotation.to_dict(), 'scale': self.scale}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(Point3D.from_dict(data['position']), Rotation3D.from_dict(data['rotation']), data['scale'])

    def _concatenate(self, other: 'ScaledPose3D') -> None:
        super()._concatenate(other)
        self.scale *= other.scale

    def __eq__(self, other: Any) -> bool:

        result = super().__eq__(other)

        if result is NotImplemented:
            return result

        return result and self.scale == other.scale

    def __mul__(self, other: Any) -> Any:

        if isinstance(other, ScaledPose3D):
            out = self.copy()
            out._concatenate(other)
            return out

        if isinstance(other, PoseApplicable3D):
            return other.applying(self)

        return NotImplemented

    def __imul__(self, other: 'ScaledPose3D') -> Self:

        if not isinstance(other, ScaledPose3D):
            return NotImplemented

        self._concatenate(other)
        return self
