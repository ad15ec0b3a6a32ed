# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
spatial3d provides 3D spatial math types: angles, vectors, points, sizes, quaternion backed rotations, and poses.

The most commonly used classes are re-exported here::

    >>> from spatial3d import Rotation3D, Vector3D, Angle, RotationAxis3D
    >>> quarter_turn = Rotation3D.from_angle_axis(Angle.from_degrees(90), RotationAxis3D.z_axis())
    >>> (quarter_turn * Vector3D(1, 0, 0)).is_approximately_equal(Vector3D(0, 1, 0))
    True

The numpy level routines the classes are built on are available in :mod:`spatial3d.rotations.core` and the numeric
tolerance configuration is in :mod:`spatial3d.utilities`.
"""

# the rotations package must be imported first since the primitives depend on its core routines
import spatial3d.rotations

from spatial3d.angles import Angle
from spatial3d.axes import Axis3D, RotationAxis3D
from spatial3d.primitives import Vector3D, Point3D, Size3D
from spatial3d.rotations import Rotation3D, EulerAngles, EulerOrder, SlerpPath
from spatial3d.poses import Pose3D, ScaledPose3D
from spatial3d.utilities.options import NumericOptions, DEFAULT_OPTIONS


__all__ = ['Angle', 'Axis3D', 'RotationAxis3D', 'Vector3D', 'Point3D', 'Size3D',
           'Rotation3D', 'EulerAngles', 'EulerOrder', 'SlerpPath', 'Pose3D', 'ScaledPose3D',
           'NumericOptions', 'DEFAULT_OPTIONS']
