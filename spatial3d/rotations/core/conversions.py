# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Core conversion routines for rotation representations

This module contains core routines for converting between quaternions, rotation matrices, angle/axis pairs, and Euler
angles.  All routines are implemented purely on numpy arrays (or array like objects).
"""

import logging

import numpy as np

from spatial3d._typing import ARRAY_LIKE, DOUBLE_ARRAY, EULER_ORDERS, F_ARRAY_LIKE

from spatial3d.rotations.core._helpers import (_check_matrix_array_and_shape, _check_quaternion_array_and_shape,
                                               _check_vector_array_and_shape,
                                               _check_homogeneous_matrix_array_and_shape)
from spatial3d.rotations.core.elementals import skew
from spatial3d.rotations.core.quaternion_math import quaternion_normalize
from spatial3d.utilities.numerics import is_almost_equal


__all__ = ['quaternion_to_rotmat', 'quaternion_to_homogeneous', 'rotmat_to_quaternion',
           'quaternion_to_angle', 'quaternion_to_axis', 'angle_axis_to_quaternion',
           'euler_to_quaternion', 'quaternion_to_euler', 'homogeneous_scale']


_LOGGER: logging.Logger = logging.getLogger(__name__)


def quaternion_to_rotmat(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation quaternion into its equivalent rotation matrix.

    Rotation quaternions are converted to rotation matrices by using:

    .. math::
        \mathbf{q}=\left[\begin{array}{c}\mathbf{q}_v \\ q_s\end{array}\right] \\
        \mathbf{T} = (q_s^2-\mathbf{q}_v^T\mathbf{q}_v)\mathbf{I}_{3\times 3}+2\mathbf{q}_v\mathbf{q}_v^T+2q_s
        \left[\mathbf{q}_v\times\right]

    where :math:`\left[\bullet\times\right]` is the skew symmetric cross product matrix (see :func:`skew`).  The result
    rotates column vectors, so ``quaternion_to_rotmat(q) @ v`` is the same as rotating ``v`` by ``q``.

    This function is vectorized, meaning that you can specify multiple rotation quaternions to be converted to matrices
    by specifying each quaternion as a column.  Each rotation matrix is stacked along the first axis of the output.

    :param quaternion: The rotation quaternion(s) to be converted to the rotation matrix(ces)
    :return: a numpy array containing the rotation matrix(ces) corresponding to the input quaternion(s)
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    qs = quaternion[-1].reshape(-1, 1, 1)
    qv = quaternion[:3].reshape(3, -1)

    return ((qs ** 2 - (qv * qv).sum(axis=0).reshape(-1, 1, 1)) * np.eye(3) + 2 * np.einsum('ij,jk->jik', qv, qv.T) +
            2 * qs * skew(qv)).squeeze()


def quaternion_to_homogeneous(quaternion: ARRAY_LIKE, translation: ARRAY_LIKE | None = None) -> DOUBLE_ARRAY:
    """
    Builds a 4x4 homogeneous transformation matrix from a single quaternion and an optional translation.

    The rotation fills the upper left 3x3 block and the translation fills the first three rows of the last column.

    :param quaternion: The rotation quaternion
    :param translation: The 3 element translation (zero if not provided)
    :return: The 4x4 matrix
    """

    matrix = np.eye(4)
    matrix[:3, :3] = quaternion_to_rotmat(quaternion)

    if translation is not None:
        matrix[:3, 3] = _check_vector_array_and_shape(translation)

    return matrix


def rotmat_to_quaternion(rotation_matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation matrix into a rotation quaternion.

    The quaternion is returned as a numpy array and is formed by:

    .. math::
        q_s = \frac{1}{2}\sqrt{(\text{Tr}(\mathbf{T})+1)}\\
        \mathbf{q}_v = \frac{1}{2}\left[\begin{array}{c}\text{copysign}(\sqrt{1+t_{11}-t_{22}-t_{33}}, t_{32}-t_{23})\\
        \text{copysign}(\sqrt{1-t_{11}+t_{22}-t_{33}}, t_{13}-t_{31})\\
        \text{copysign}(\sqrt{1-t_{11}-t_{22}+t_{33}}, t_{21}-t_{12})\end{array}\right]

    where :math:`\text{Tr}(\bullet)` is the trace operator, :math:`t_{ij}` is the :math:`i, j` element of
    :math:`\mathbf{T}`, and :math:`\text{copysign}(a, b)` overwrites the sign of :math:`a` with the sign of :math:`b`.

    The scalar component of the result is always non-negative.  Matrices that are not proper rotations still produce
    a quaternion, it just won't reproduce the input matrix.

    This function is vectorized over matrices stacked down the first axis.

    :param rotation_matrix: The rotation matrix to convert to a rotation quaternion
    :return: the rotation quaternion(s) corresponding to the input matrix(ces)
    """

    rotation_matrix = _check_matrix_array_and_shape(rotation_matrix)

    # compute the scalar portion of the quaternion.  The max(..., 0) is to avoid rounding errors.
    q_scalar = 0.5 * np.sqrt(np.maximum(np.trace(rotation_matrix.T) + 1, 0))

    # extract the diagonal elements from the matrix(ces)
    t_diag = np.diagonal(rotation_matrix.T).reshape((-1, 1, 3))

    temp_mat = np.array([[1, -1, -1],
                         [-1, 1, -1],
                         [-1, -1, 1]])

    # form the vector portion of the quaternion.  The max(..., 0) is to avoid rounding errors
    q_vec = np.sqrt(np.maximum((temp_mat * t_diag).sum(axis=-1) + 1, 0)).squeeze() / 2.0

    # get the skew symmetric values from the rotation matrix
    rotation_skew = rotation_matrix - rotation_matrix.swapaxes(-2, -1)

    # copy the signs from the skew values onto the vector portion(s)
    q_vec = np.copysign(q_vec.T, [-rotation_skew[..., 1, 2],
                                  rotation_skew[..., 0, 2],
                                  -rotation_skew[..., 0, 1]]).squeeze()

    try:
        return np.hstack([q_vec, q_scalar])
    except ValueError:
        return np.vstack([q_vec, q_scalar])


def homogeneous_scale(matrix: ARRAY_LIKE) -> float:
    """
    Returns the uniform scale encoded in the upper 3x3 block of a 4x4 homogeneous matrix.

    The lengths of the first three columns are compared with :func:`.is_almost_equal`.  If they agree the first length
    is the scale, otherwise there is no uniform scale and NaN is returned.

    :param matrix: The 4x4 matrix
    :return: The uniform scale or NaN
    """

    matrix = _check_homogeneous_matrix_array_and_shape(matrix)

    l1, l2, l3 = np.linalg.norm(matrix[:3, :3], axis=0)

    if is_almost_equal(l1, l2) and is_almost_equal(l2, l3):
        return float(l1)

    return float('nan')


def quaternion_to_angle(quaternion: ARRAY_LIKE) -> float:
    r"""
    The angle of rotation represented by a quaternion, :math:`2\text{atan2}(\|\mathbf{q}_v\|, q_s)`.

    The result is in :math:`[0, 2\pi]`.

    :param quaternion: The quaternion
    :return: The rotation angle in radians
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    return float(2 * np.arctan2(np.linalg.norm(quaternion[:3]), quaternion[-1]))


def quaternion_to_axis(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    The unit axis of rotation represented by a quaternion.

    A quaternion with a zero vector part (the identity) has no well defined axis and the zero vector is returned.

    :param quaternion: The quaternion
    :return: The unit rotation axis, or zeros
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    length = np.linalg.norm(quaternion[:3])

    if length == 0:
        return np.zeros(3)

    return quaternion[:3] / length


def angle_axis_to_quaternion(angle: float, axis: ARRAY_LIKE, normalize: bool = True) -> DOUBLE_ARRAY:
    r"""
    Converts an angle and an axis into a rotation quaternion.

    .. math::
        \mathbf{q} = \left[\begin{array}{c} \text{sin}(\frac{\theta}{2})\mathbf{a} \\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    The axis is used as given.  When `normalize` is true the resulting quaternion (not the axis) is scaled to unit
    length, so a non-unit axis produces a valid quaternion that rotates by a different angle than requested.

    :param angle: The rotation angle in radians
    :param axis: The rotation axis
    :param normalize: Whether to normalize the resulting quaternion
    :return: The rotation quaternion
    """

    axis = _check_vector_array_and_shape(axis)

    half_angle = angle / 2

    quaternion = np.hstack([np.sin(half_angle) * axis, np.cos(half_angle)])

    if normalize:
        return quaternion_normalize(quaternion)

    return quaternion


def _check_order(order: str) -> str:
    fixed_order = order.lower()

    if fixed_order not in ('xyz', 'zxy'):
        raise ValueError('Euler angles only support the xyz and zxy orders.  You entered {}'.format(order))

    return fixed_order


def euler_to_quaternion(angles: F_ARRAY_LIKE, order: EULER_ORDERS = 'xyz') -> DOUBLE_ARRAY:
    r"""
    Converts roll, pitch, and yaw angles into a unit rotation quaternion.

    With half angles :math:`r, p, y` of the three input angles the real part and the three imaginary parts are

    .. math::
        q_r = c_r c_p c_y + s_r s_p s_y \\
        i_1 = s_r c_p c_y - c_r s_p s_y \\
        i_2 = c_r s_p c_y + s_r c_p s_y \\
        i_3 = c_r c_p s_y - s_r s_p c_y

    For the ``xyz`` order :math:`(i_1, i_2, i_3)` are the x, y, z components, so the angles are rotations about x, y,
    and z, with the rotation about x applied first.  For the ``zxy`` order :math:`(i_1, i_2, i_3)` are the z, x, y
    components, so the angles are rotations about z, x, and y, with the rotation about z applied first.

    :param angles: The three angles in radians
    :param order: Either 'xyz' or 'zxy'
    :return: The rotation quaternion
    :raises ValueError: if the order is not supported
    """

    fixed_order = _check_order(order)

    half_angles = _check_vector_array_and_shape(angles) / 2

    cosr, cosp, cosy = np.cos(half_angles)
    sinr, sinp, siny = np.sin(half_angles)

    r = cosr * cosp * cosy + sinr * sinp * siny
    i1 = sinr * cosp * cosy - cosr * sinp * siny
    i2 = cosr * sinp * cosy + sinr * cosp * siny
    i3 = cosr * cosp * siny - sinr * sinp * cosy

    if fixed_order == 'xyz':
        quaternion = np.array([i1, i2, i3, r])
    else:
        quaternion = np.array([i2, i3, i1, r])

    return quaternion_normalize(quaternion)


def quaternion_to_euler(quaternion: ARRAY_LIKE, order: EULER_ORDERS = 'xyz',
                        clamp: bool = True) -> tuple[float, float, float]:
    r"""
    Converts a rotation quaternion into roll, pitch, and yaw angles.

    This is the inverse of :func:`euler_to_quaternion`.  With :math:`(i_1, i_2, i_3)` taken from the quaternion
    according to `order`:

    .. math::
        \text{roll} = \text{atan2}(2(q_r i_1 + i_2 i_3), 1 - 2(i_1^2 + i_2^2)) \\
        \text{pitch} = 2\text{atan2}(\sqrt{1+v}, \sqrt{1-v}) - \frac{\pi}{2},\quad v = 2(q_r i_2 - i_1 i_3) \\
        \text{yaw} = \text{atan2}(2(q_r i_3 + i_1 i_2), 1 - 2(i_2^2 + i_3^2))

    Near gimbal lock :math:`v` can drift slightly outside of :math:`[-1, 1]`, which would make the square roots NaN.
    When `clamp` is true (the default) :math:`v` is clamped first.

    :param quaternion: The rotation quaternion
    :param order: Either 'xyz' or 'zxy'
    :param clamp: Whether to clamp the pitch term into [-1, 1]
    :return: The roll, pitch, and yaw angles in radians
    :raises ValueError: if the order is not supported
    """

    fixed_order = _check_order(order)

    x, y, z, r = _check_quaternion_array_and_shape(quaternion)

    if fixed_order == 'xyz':
        i1, i2, i3 = x, y, z
    else:
        i1, i2, i3 = z, x, y

    roll = np.arctan2(2 * (r * i1 + i2 * i3), 1 - 2 * (i1 ** 2 + i2 ** 2))

    val = 2 * (r * i2 - i1 * i3)

    if clamp and not -1 <= val <= 1:
        _LOGGER.debug('Clamping the pitch term {} into [-1, 1]'.format(val))
        val = float(np.clip(val, -1, 1))

    pitch = 2 * np.arctan2(np.sqrt(1 + val), np.sqrt(1 - val)) - np.pi / 2

    yaw = np.arctan2(2 * (r * i3 + i1 * i2), 1 - 2 * (i2 ** 2 + i3 ** 2))

    return float(roll), float(pitch), float(yaw)
