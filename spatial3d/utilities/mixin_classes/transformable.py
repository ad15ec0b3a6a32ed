"""
This module provides the capability mixins shared by the geometric types.

Each mixin asks the class using it to implement a single in place primitive and then builds the rest of the capability
on top of it.  The copying variants (``rotated``, ``translated``, ``scaled_by``, ``applying`` ...) all follow the same
pattern: copy self, mutate the copy in place, and return the copy.  For example, :class:`Rotatable3D` only requires
:meth:`~Rotatable3D.rotate_by_quaternion`::

    >>> from spatial3d import Vector3D, Rotation3D, Angle, RotationAxis3D
    >>> quarter_turn = Rotation3D.from_angle_axis(Angle.from_degrees(90), RotationAxis3D.z_axis())
    >>> Vector3D(1, 0, 0).rotated(by=quarter_turn).is_approximately_equal(Vector3D(0, 1, 0))
    True
"""

import copy
from typing import Self, TYPE_CHECKING

from spatial3d._typing import ARRAY_LIKE

if TYPE_CHECKING:
    from spatial3d.primitives import Vector3D, Size3D
    from spatial3d.rotations.rotation import Rotation3D
    from spatial3d.poses import Pose3D, ScaledPose3D


__all__ = ['Copyable', 'Rotatable3D', 'Translatable3D', 'Scalable3D', 'PoseApplicable3D']


class Copyable:
    """
    Provides the deep copy used by all of the copy-then-mutate helpers.
    """

    def copy(self) -> Self:
        """
        Returns a deep copy of self.

        :return: A deep copy of self breaking all mutability
        """

        return copy.deepcopy(self)


class Rotatable3D(Copyable):
    """
    A mixin for entities that can be rotated.

    Subclasses must implement :meth:`rotate_by_quaternion`.
    """

    def rotate_by_quaternion(self, quaternion: ARRAY_LIKE) -> None:
        """
        Rotates the entity in place by a unit quaternion stored as ``[x, y, z, w]``.

        :param quaternion: The quaternion to rotate by
        """

        raise NotImplementedError

    def rotate(self, by: 'Rotation3D | ARRAY_LIKE') -> None:
        """
        Rotates the entity in place.

        :param by: The rotation to apply, either as a :class:`.Rotation3D` or as a raw quaternion
        """

        # import here to avoid a circular import
        from spatial3d.rotations.rotation import Rotation3D

        if isinstance(by, Rotation3D):
            self.rotate_by_quaternion(by.quaternion)
        else:
            self.rotate_by_quaternion(by)

    def rotated(self, by: 'Rotation3D | ARRAY_LIKE') -> Self:
        """
        Returns a rotated copy of the entity.

        :param by: The rotation to apply, either as a :class:`.Rotation3D` or as a raw quaternion
        :return: The rotated copy
        """

        out = self.copy()
        out.rotate(by)
        return out


class Translatable3D(Copyable):
    """
    A mixin for entities that can be translated.

    Subclasses must implement :meth:`translate`.
    """

    def translate(self, by: 'Vector3D') -> None:
        """
        Translates the entity in place.

        :param by: The vector to offset the entity by
        """

        raise NotImplementedError

    def translated(self, by: 'Vector3D') -> Self:
        """
        Returns a translated copy of the entity.

        :param by: The vector to offset the entity by
        :return: The translated copy
        """

        out = self.copy()
        out.translate(by)
        return out


class Scalable3D(Copyable):
    """
    A mixin for entities that can be scaled.

    Subclasses must implement :meth:`scale_by` and :meth:`uniformly_scale`.
    """

    def scale_by(self, x: float, y: float, z: float) -> None:
        """
        Scales the entity in place along each axis.

        :param x: The scale factor along x
        :param y: The scale factor along y
        :param z: The scale factor along z
        """

        raise NotImplementedError

    def uniformly_scale(self, scale: float) -> None:
        """
        Scales the entity in place by the same factor along every axis.

        :param scale: The scale factor
        """

        raise NotImplementedError

    def scale_by_size(self, size: 'Size3D') -> None:
        """
        Scales the entity in place using the width, height, and depth of a size as the x, y, and z factors.

        :param size: The size to scale by
        """

        self.scale_by(size.width, size.height, size.depth)

    def scaled_by(self, x: float, y: float, z: float) -> Self:
        out = self.copy()
        out.scale_by(x, y, z)
        return out

    def uniformly_scaled(self, scale: float) -> Self:
        out = self.copy()
        out.uniformly_scale(scale)
        return out

    def scaled_by_size(self, size: 'Size3D') -> Self:
        out = self.copy()
        out.scale_by_size(size)
        return out


class PoseApplicable3D(Rotatable3D):
    """
    A mixin for primitives that poses can be applied to.

    Applying a pose first offsets the primitive by the pose position, then rotates it by the pose rotation, and (for a
    :class:`.ScaledPose3D`) finally multiplies it by the pose scale.  This order is fixed.

    Subclasses must implement :meth:`_offset` and :meth:`_multiply` along with the :class:`Rotatable3D` primitive.
    """

    def _offset(self, offset: 'Vector3D') -> None:
        raise NotImplementedError

    def _multiply(self, factor: float) -> None:
        raise NotImplementedError

    def apply(self, pose: 'Pose3D | ScaledPose3D') -> None:
        """
        Applies a pose (or scaled pose) to the primitive in place.

        :param pose: The pose to apply
        :raises TypeError: if `pose` is not a pose
        """

        # import here to avoid a circular import
        from spatial3d.poses import Pose3D, ScaledPose3D

        if not isinstance(pose, (Pose3D, ScaledPose3D)):
            raise TypeError('Only Pose3D and ScaledPose3D instances can be applied.  You provided {}'.format(
                type(pose).__name__))

        self._offset(pose.position.to_vector())
        self.rotate(pose.rotation)

        if isinstance(pose, ScaledPose3D):
            self._multiply(pose.scale)

    def applying(self, pose: 'Pose3D | ScaledPose3D') -> Self:
        """
        Returns a copy of the primitive with a pose applied.

        :param pose: The pose to apply
        :return: The transformed copy
        """

        out = self.copy()
        out.apply(pose)
        return out

    def unapply(self, pose: 'Pose3D | ScaledPose3D') -> None:
        """
        Applies the inverse of a pose to the primitive in place.

        :param pose: The pose whose inverse is applied
        """

        self.apply(pose.inverse)

    def unapplying(self, pose: 'Pose3D | ScaledPose3D') -> Self:
        out = self.copy()
        out.unapply(pose)
        return out
