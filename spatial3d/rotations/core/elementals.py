"""
Elemental matrices used when building and flipping rotations.

Everything here works on plain numpy arrays so that it can be used by the conversion routines without creating
circular imports.
"""

import numpy as np

from spatial3d._typing import ARRAY_LIKE, DOUBLE_ARRAY
from spatial3d.rotations.core._helpers import _check_vector_array_and_shape


__all__ = ["skew", "reflection_matrix"]


_AXIS_INDEX = {'x': 0, 'y': 1, 'z': 2}


def skew(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function returns a numpy array with the skew symmetric cross product matrix for vector.

    The skew symmetric cross product matrix is defined such that:

    .. math::
        \mathbf{a}\times\mathbf{b}=\left[\mathbf{a}\times\right]\mathbf{b} \\
        \left[\mathbf{a}\times\right] = \left[\begin{array}{ccc} 0 & -a_3 & a_2 \\
        a_3 & 0 & -a_1 \\
        -a_2 & a_1 & 0 \end{array}\right]

    This function is vectorized, therefore you can input multiple vectors as a 3xn array where each column is an
    independent vector.  The resulting skew matrix output will be nx3x3 where the first axis stores each matrix

    :param vector: The vector to compute a skew symmetric matrix for
    :return: The skew symmetric cross product matrix(ces) corresponding to the vector(s)
    """

    vector = _check_vector_array_and_shape(vector)

    if vector.ndim > 1:
        zeros = np.zeros(vector.shape[-1])
    else:
        zeros = 0

    return np.array([zeros, -vector[2], vector[1],
                     vector[2], zeros, -vector[0],
                     -vector[1], vector[0], zeros]).T.reshape(-1, 3, 3).squeeze()


def reflection_matrix(axis: str) -> DOUBLE_ARRAY:
    """
    Returns the diagonal matrix used when flipping a pose along an axis.

    The matrix keeps the component along `axis` and negates the other two, so flipping along x uses
    ``diag(1, -1, -1)``.

    :param axis: One of 'x', 'y', or 'z'
    :return: The 3x3 diagonal matrix
    :raises ValueError: if the axis is not x, y, or z
    """

    try:
        index = _AXIS_INDEX[axis.lower()]
    except KeyError:
        raise ValueError('The axis must be one of x, y, or z.  You entered {}'.format(axis))

    diagonal = -np.ones(3)
    diagonal[index] = 1

    return np.diag(diagonal)
