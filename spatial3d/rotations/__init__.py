"""
This package provides the rotation functionality for spatial3d.

The :class:`.Rotation3D` class is the main way rotations are communicated throughout spatial3d.  It wraps a quaternion
stored as ``[x, y, z, w]`` and provides construction from Euler angles, angle/axis pairs, rotation matrices, and
forward/up directions along with composition, inversion, interpolation, and swing-twist decomposition.

The numpy level routines that :class:`.Rotation3D` is built on live in :mod:`.rotations.core` and can be used directly
when working with raw arrays.
"""

from spatial3d.rotations.core import *

from spatial3d.rotations.rotation import Rotation3D, EulerAngles, EulerOrder, SlerpPath

__all__ = ['Rotation3D', 'EulerAngles', 'EulerOrder', 'SlerpPath',
           'quaternion_to_rotmat', 'quaternion_to_homogeneous', 'rotmat_to_quaternion',
           'quaternion_to_angle', 'quaternion_to_axis', 'angle_axis_to_quaternion',
           'euler_to_quaternion', 'quaternion_to_euler', 'homogeneous_scale',
           'skew', 'reflection_matrix',
           'quaternion_normalize', 'quaternion_conjugate', 'quaternion_inverse', 'quaternion_multiplication',
           'quaternion_dot', 'quaternion_log', 'quaternion_exp', 'quaternion_act', 'quaternion_twist',
           'nlerp', 'slerp', 'slerp_longest', 'bezier', 'spline']
