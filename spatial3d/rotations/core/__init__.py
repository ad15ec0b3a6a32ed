"""
This module contains fundamental mathematical operations and utilities for rotation
calculations. It has no dependencies on other rotation modules to avoid circular imports.
All functions here are pure mathematical operations on numpy arrays that serve as building blocks
for the :class:`.Rotation3D` class and the pose classes.
"""

import spatial3d.rotations.core.conversions
import spatial3d.rotations.core.elementals
import spatial3d.rotations.core.quaternion_math

from spatial3d.rotations.core.conversions import (quaternion_to_rotmat, quaternion_to_homogeneous, rotmat_to_quaternion,
                                                  quaternion_to_angle, quaternion_to_axis, angle_axis_to_quaternion,
                                                  euler_to_quaternion, quaternion_to_euler, homogeneous_scale)

from spatial3d.rotations.core.elementals import skew, reflection_matrix

from spatial3d.rotations.core.quaternion_math import (quaternion_normalize, quaternion_conjugate, quaternion_inverse,
                                                      quaternion_multiplication, quaternion_dot, quaternion_log,
                                                      quaternion_exp, quaternion_act, quaternion_twist,
                                                      nlerp, slerp, slerp_longest, bezier, spline)

__all__ = ['quaternion_to_rotmat', 'quaternion_to_homogeneous', 'rotmat_to_quaternion',
           'quaternion_to_angle', 'quaternion_to_axis', 'angle_axis_to_quaternion',
           'euler_to_quaternion', 'quaternion_to_euler', 'homogeneous_scale',
           'skew', 'reflection_matrix',
           'quaternion_normalize', 'quaternion_conjugate', 'quaternion_inverse', 'quaternion_multiplication',
           'quaternion_dot', 'quaternion_log', 'quaternion_exp', 'quaternion_act', 'quaternion_twist',
           'nlerp', 'slerp', 'slerp_longest', 'bezier', 'spline']
