"""
Quaternion algebra on plain numpy arrays.

Quaternions are stored as 4 element arrays ``[x, y, z, w]`` with the vector (imaginary) part first and the scalar
(real) part last.  Where noted, functions are vectorized over columns (a 4xn array holds n quaternions).

Unlike many attitude libraries, normalization here never flips the sign of a quaternion.  :math:`\\mathbf{q}` and
:math:`-\\mathbf{q}` describe the same rotation but they are kept as distinct values so that exact comparisons stay
exact; use :func:`quaternion_dot` based comparisons when the rotation itself is what matters.
"""

import logging

import numpy as np

from spatial3d._typing import ARRAY_LIKE, DOUBLE_ARRAY, DatetimeLike

from spatial3d.rotations.core._helpers import _check_quaternion_array_and_shape, _check_vector_array_and_shape

__all__ = ["quaternion_normalize", "quaternion_conjugate", "quaternion_inverse", "quaternion_multiplication",
           "quaternion_dot", "quaternion_log", "quaternion_exp", "quaternion_act", "quaternion_twist",
           "nlerp", "slerp", "slerp_longest", "bezier", "spline"]


_LOGGER: logging.Logger = logging.getLogger(__name__)


IDENTITY_QUATERNION = np.array([0, 0, 0, 1.0])
"""
The identity rotation quaternion
"""

NLERP_THRESHOLD: float = 0.9995
"""
The cosine of the angle between two quaternions above which slerp falls back to nlerp
"""

_ANTIPODAL_TOLERANCE: float = 1e-12
"""
The length of the rejection of q1 from q0 below which two unit quaternions are treated as antipodal
"""


def quaternion_normalize(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Scales the quaternion(s) to unit length without changing the sign of any component.

    :param quaternion: the quaternion(s) to normalize
    :returns: The normalized quaternion(s) as a new array
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    work_quaternion /= np.linalg.norm(work_quaternion, axis=0, keepdims=True)

    return work_quaternion


def quaternion_conjugate(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Returns the conjugate of the quaternion(s), which negates the vector portion.

    For unit quaternions this is the same as the inverse.

    :param quaternion: The quaternion(s) to conjugate
    :return: The conjugate quaternion(s) as a new array
    """

    # break mutability
    quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    quaternion[:3] *= -1

    return quaternion


def quaternion_inverse(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function provides the multiplicative inverse of a quaternion.

    The inverse is defined such that :math:`\mathbf{q}\otimes\mathbf{q}^{-1}=\mathbf{q}_I` where
    :math:`\mathbf{q}_I=\left[\begin{array}{cccc}0&0&0&1\end{array}\right]^T` is the identity quaternion.  In general
    this is the conjugate divided by the squared norm:

    .. math::
        \mathbf{q}^{-1}=\frac{\mathbf{q}^*}{\left\|\mathbf{q}\right\|^2}

    which reduces to the conjugate for unit quaternions.

    This function is vectorized over columns.

    :param quaternion: The quaternion(s) to be inverted
    :return: a numpy array representing the inverse quaternion(s)
    """

    conjugate = quaternion_conjugate(quaternion)

    conjugate /= (conjugate * conjugate).sum(axis=0, keepdims=True)

    return conjugate


def quaternion_multiplication(quaternion_1_in: ARRAY_LIKE,
                              quaternion_2_in: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function performs the Hamilton quaternion product.

    The product is defined such that ``quaternion_multiplication(q_b_to_c, q_a_to_b)`` rotates by ``q_a_to_b``
    first and then by ``q_b_to_c``.  Mathematically:

    .. math::
        \mathbf{q}_1\otimes\mathbf{q}_2=\left[\begin{array}{c}q_{s1}\mathbf{q}_{v2} + q_{s2}\mathbf{q}_{v1} +
        \mathbf{q}_{v1}\times\mathbf{q}_{v2}\\
        q_{s1}q_{s2}-\mathbf{q}_{v1}^T\mathbf{q}_{v2}\end{array}\right]

    This function is vectorized, therefore you can input multiple quaternions as a 4xn array where each column is an
    independent quaternion.

    :param quaternion_1_in: The first quaternion to multiply
    :param quaternion_2_in: The second quaternion to multiply
    :return: The Hamilton product of quaternion_1 and quaternion_2
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1_in)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2_in)

    qs1 = quaternion_1[-1]
    qv1 = quaternion_1[0:3]

    qs2 = quaternion_2[-1]
    qv2 = quaternion_2[0:3]

    qout = np.concatenate([qs1 * qv2 + qs2 * qv1 + np.cross(qv1, qv2, axis=0),
                           [qs1 * qs2 - (qv1 * qv2).sum(axis=0)]], axis=0)

    return qout


def quaternion_dot(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE) -> float:
    """
    The 4 dimensional dot product of two quaternions.

    For unit quaternions a dot product of :math:`\\pm 1` means both quaternions describe the same rotation.

    :param quaternion_1: The first quaternion
    :param quaternion_2: The second quaternion
    :return: The dot product
    """

    return float(np.inner(_check_quaternion_array_and_shape(quaternion_1),
                          _check_quaternion_array_and_shape(quaternion_2)))


def quaternion_log(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    The natural logarithm of a single quaternion.

    .. math::
        \text{log}(\mathbf{q}) = \left[\begin{array}{c}\text{cos}^{-1}\left(\frac{q_s}{\|\mathbf{q}\|}\right)
        \frac{\mathbf{q}_v}{\|\mathbf{q}_v\|} \\ \text{ln}\|\mathbf{q}\|\end{array}\right]

    :param quaternion: The quaternion to take the logarithm of
    :return: The logarithm as a quaternion array
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    length = np.linalg.norm(quaternion)
    vector_length = np.linalg.norm(quaternion[:3])

    real = np.log(length)

    if vector_length == 0:
        return np.array([0, 0, 0, real])

    angle = np.arccos(np.clip(quaternion[-1] / length, -1, 1))

    return np.hstack([angle * quaternion[:3] / vector_length, real])


def quaternion_exp(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    The exponential of a single quaternion.

    .. math::
        \text{exp}(\mathbf{q}) = e^{q_s}\left[\begin{array}{c}\text{sin}(\|\mathbf{q}_v\|)
        \frac{\mathbf{q}_v}{\|\mathbf{q}_v\|} \\ \text{cos}(\|\mathbf{q}_v\|)\end{array}\right]

    :param quaternion: The quaternion to exponentiate
    :return: The exponential as a quaternion array
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    scale = np.exp(quaternion[-1])
    vector_length = np.linalg.norm(quaternion[:3])

    if vector_length == 0:
        return np.array([0, 0, 0, scale])

    return scale * np.hstack([np.sin(vector_length) * quaternion[:3] / vector_length, np.cos(vector_length)])


def quaternion_act(quaternion: ARRAY_LIKE, vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Rotates a 3 element vector by a quaternion.

    The rotated vector is the vector portion of :math:`\mathbf{q}\otimes\mathbf{v}\otimes\mathbf{q}^{-1}` where the
    vector is treated as a pure quaternion.  Using the inverse (rather than the conjugate) keeps the result a pure
    rotation even when the quaternion is not quite unit length.

    :param quaternion: The quaternion describing the rotation
    :param vector: The vector to rotate
    :return: The rotated vector as a new array
    """

    vector = _check_vector_array_and_shape(vector)

    pure = np.hstack([vector, 0.0])

    rotated = quaternion_multiplication(quaternion_multiplication(quaternion, pure), quaternion_inverse(quaternion))

    return rotated[:3]


def quaternion_twist(quaternion: ARRAY_LIKE, twist_axis: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Returns the twist portion of the swing-twist decomposition of a quaternion about an axis.

    The vector part of the quaternion is projected onto the twist axis and recombined with the scalar part:

    .. math::
        \mathbf{p} = \frac{\mathbf{q}_v^T\mathbf{a}}{\mathbf{a}^T\mathbf{a}}\mathbf{a}\\
        \mathbf{q}_t = \frac{\left[\mathbf{p}^T\ q_s\right]^T}{\left\|\left[\mathbf{p}^T\ q_s\right]^T\right\|}

    When the rotation is a half turn about an axis perpendicular to the twist axis the projection is the zero
    quaternion; in that case there is no twist and the identity is returned.

    :param quaternion: The quaternion to decompose
    :param twist_axis: The axis to isolate rotation about.  It must not be the zero vector.
    :return: The twist quaternion
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)
    twist_axis = _check_vector_array_and_shape(twist_axis)

    axis_length_squared = float(twist_axis @ twist_axis)

    assert axis_length_squared > 0, 'The twist axis cannot be the zero vector'

    projection = (quaternion[:3] @ twist_axis) / axis_length_squared * twist_axis

    twist = np.hstack([projection, quaternion[-1]])

    length = np.linalg.norm(twist)

    if length < np.finfo(np.float64).eps:
        _LOGGER.debug('Degenerate twist about {}.  Returning the identity'.format(twist_axis))
        return IDENTITY_QUATERNION.copy()

    return twist / length


def _interpolation_fraction(time: float | DatetimeLike,
                            time0: float | DatetimeLike,
                            time1: float | DatetimeLike) -> float:
    """
    Computes how far between time0 and time1 the requested time is.
    """

    try:
        return float((time - time0) / (time1 - time0))  # type: ignore
    except TypeError:
        raise TypeError('time, time0, and time1 must support subtraction resulting in a type that supports true '
                        'division.  Typically this means they should all be floats or all be DatetimeLike objects')


def _orthogonal_quaternion(quaternion: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    """
    Returns a unit quaternion orthogonal (in 4D) to the input unit quaternion.
    """

    x, y, z, w = quaternion

    return np.array([-y, x, -w, z])


def _slerp_unit(q0: DOUBLE_ARRAY, q1: DOUBLE_ARRAY, dt: float,
                threshold: float = NLERP_THRESHOLD) -> DOUBLE_ARRAY:
    """
    Spherical interpolation along the great circle arc from q0 to q1 without any path correction.

    Both inputs must already be unit quaternions.
    """

    # ensure the domain for acos (only will leave due to numerical issues)
    cos_angle = float(np.clip(np.inner(q0, q1), -1, 1))

    if cos_angle > threshold:
        # if the quaternions are really close revert to nlerp
        _LOGGER.debug('Quaternions are nearly parallel.  Using nlerp instead of slerp')
        return nlerp(q0, q1, dt)

    # form an orthonormal basis
    qb = q1 - q0 * cos_angle
    qb_norm = np.linalg.norm(qb)

    angle0 = np.arctan2(qb_norm, cos_angle)  # angle between q0 and q1
    angle = angle0 * dt  # angle between q0 and q

    if qb_norm < _ANTIPODAL_TOLERANCE:
        # any great circle connects antipodal points so pick one through an orthogonal quaternion
        _LOGGER.debug('Quaternions are antipodal.  Interpolating through an arbitrary orthogonal arc')
        qb = _orthogonal_quaternion(q0)
    else:
        qb /= qb_norm

    # perform the interpolation
    q = q0 * np.cos(angle) + qb * np.sin(angle)
    q /= np.linalg.norm(q)

    return q


def nlerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE,
          time: float | DatetimeLike,
          time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1) -> DOUBLE_ARRAY:
    r"""
    This function performs normalized linear interpolation of rotation quaternions.

    NLERP of quaternions involves first performing a linear interpolation between the two vectors, and then normalizing
    the interpolated result to have unit length.  That is:

    .. math::
        \mathbf{q}=\frac{\mathbf{q}_0(1-p)+\mathbf{q}_1p}
        {\left\|\mathbf{q}_0(1-p)+\mathbf{q}_1p\right\|}

    where :math:`p` is the fractional percent of the way between :math:`\mathbf{q}_0` and :math:`\mathbf{q}_1` that we
    want to interpolate at.

    When using this function you can either specify the argument `time` as the fractional percent that you want to
    interpolate at, or specify the keyword arguments `time0` and `time1` to be the times corresponding to the first and
    second quaternion respectively and the function will compute the fractional percent for you.  All three may also be
    python datetime (or pandas Timestamp) objects.

    .. warning::
        NLERP does not perform a constant angular velocity interpolation, therefore it is not well suited to
        interpolating between quaternions that are far apart.  Use :func:`slerp` for that.

    :param quaternion0: The starting quaternion(s)
    :param quaternion1: The ending quaternion(s)
    :param time: The time to interpolate the quaternions at, as a fractional percent or as the actual time between
                `time0` and `time1`
    :param time0: the time(s) corresponding to the first quaternion(s).
    :param time1: the time(s) corresponding to the second quaternion(s).
    :return: The interpolated quaternion(s)
    """

    dt = _interpolation_fraction(time, time0, time1)

    q0 = _check_quaternion_array_and_shape(quaternion0)
    q1 = _check_quaternion_array_and_shape(quaternion1)

    q = q0 * (1 - dt) + q1 * dt

    q /= np.linalg.norm(q, axis=0, keepdims=True)

    return q


def slerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE,
          time: float | DatetimeLike,
          time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1,
          threshold: float = NLERP_THRESHOLD) -> DOUBLE_ARRAY:
    r"""
    This function performs spherical linear interpolation of rotation quaternions along the shortest arc.

    SLERP of quaternions involves performing a linear interpolation along the great circle arc connecting the two
    quaternions. That is:

    .. math::
        \omega = \text{cos}^{-1}(\mathbf{q}_0^T\mathbf{q}_1)\\
        \mathbf{q}=\mathbf{q}_0\text{cos}(p\omega)+
        \text{sin}(p\omega)\frac{\mathbf{q}_1-\mathbf{q}_0\text{cos}(\omega)}
        {\left\|\mathbf{q}_1-\mathbf{q}_0\text{cos}(\omega)\right\|}

    If the dot product of the two quaternions is negative the second quaternion is negated first so that the short way
    around is taken.  When the quaternions are nearly parallel (dot product above `threshold`) this falls back to
    :func:`nlerp`.

    The time arguments behave the same as for :func:`nlerp`.

    :param quaternion0: The starting quaternion
    :param quaternion1: The ending quaternion
    :param time: The time to interpolate the quaternions at, as a fractional percent or as the actual time between
                `time0` and `time1`
    :param time0: the time corresponding to the first quaternion.
    :param time1: the time corresponding to the second quaternion.
    :param threshold: The dot product above which nlerp is used instead
    :return: The interpolated quaternion
    """

    dt = _interpolation_fraction(time, time0, time1)

    # enforce unit normalization
    q0 = quaternion_normalize(quaternion0)
    q1 = quaternion_normalize(quaternion1)

    if np.inner(q0, q1) < 0:
        # if the dot product is negative negate the second quaternion to ensure the shorter path is taken
        q1 *= -1

    return _slerp_unit(q0, q1, dt, threshold)


def slerp_longest(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE,
                  time: float | DatetimeLike,
                  time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1,
                  threshold: float = NLERP_THRESHOLD) -> DOUBLE_ARRAY:
    """
    This function performs spherical linear interpolation of rotation quaternions along the longest arc.

    This is the complement of :func:`slerp`: the second quaternion is negated when the dot product is non-negative so
    that the interpolation goes the long way around.  At the end of the interpolation the result is therefore the
    negation of `quaternion1`, which represents the same rotation.

    :param quaternion0: The starting quaternion
    :param quaternion1: The ending quaternion
    :param time: The time to interpolate the quaternions at
    :param time0: the time corresponding to the first quaternion.
    :param time1: the time corresponding to the second quaternion.
    :param threshold: The dot product above which nlerp is used instead
    :return: The interpolated quaternion
    """

    dt = _interpolation_fraction(time, time0, time1)

    q0 = quaternion_normalize(quaternion0)
    q1 = quaternion_normalize(quaternion1)

    if np.inner(q0, q1) >= 0:
        q1 *= -1

    return _slerp_unit(q0, q1, dt, threshold)


def bezier(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE, quaternion2: ARRAY_LIKE, quaternion3: ARRAY_LIKE,
           t: float) -> DOUBLE_ARRAY:
    """
    Evaluates a spherical cubic Bezier curve through the de Casteljau construction.

    `quaternion0` and `quaternion3` are the end points and `quaternion1` and `quaternion2` are the control points.  The
    intermediate interpolations do not apply any shortest path correction.

    :param quaternion0: The starting quaternion
    :param quaternion1: The first control quaternion
    :param quaternion2: The second control quaternion
    :param quaternion3: The ending quaternion
    :param t: The interpolation parameter between 0 and 1
    :return: The interpolated quaternion
    """

    q0, q1, q2, q3 = (quaternion_normalize(q) for q in (quaternion0, quaternion1, quaternion2, quaternion3))

    q01 = _slerp_unit(q0, q1, t)
    q12 = _slerp_unit(q1, q2, t)
    q23 = _slerp_unit(q2, q3, t)

    q012 = _slerp_unit(q01, q12, t)
    q123 = _slerp_unit(q12, q23, t)

    return _slerp_unit(q012, q123, t)


def _spline_intermediate(previous: DOUBLE_ARRAY, current: DOUBLE_ARRAY, following: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    r"""
    Computes the squad control point for `current`.

    .. math::
        \mathbf{s}_i=\mathbf{q}_i\otimes\text{exp}\left(-\frac{\text{log}(\mathbf{q}_i^{-1}\otimes\mathbf{q}_{i+1})+
        \text{log}(\mathbf{q}_i^{-1}\otimes\mathbf{q}_{i-1})}{4}\right)
    """

    current_inverse = quaternion_inverse(current)

    log_following = quaternion_log(quaternion_multiplication(current_inverse, following))
    log_previous = quaternion_log(quaternion_multiplication(current_inverse, previous))

    control = quaternion_multiplication(current, quaternion_exp(-(log_following + log_previous) / 4))

    return quaternion_normalize(control)


def spline(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE, quaternion2: ARRAY_LIKE, quaternion3: ARRAY_LIKE,
           t: float) -> DOUBLE_ARRAY:
    """
    Interpolates between `quaternion1` and `quaternion2` along a spherical cubic spline.

    `quaternion0` and `quaternion3` are the neighbouring key rotations that shape the tangents at either end.  Control
    points are computed as in the squad algorithm and the curve is evaluated with :func:`bezier`, so the result is
    `quaternion1` at ``t=0`` and `quaternion2` at ``t=1``.

    :param quaternion0: The key quaternion before the interval
    :param quaternion1: The quaternion at the start of the interval
    :param quaternion2: The quaternion at the end of the interval
    :param quaternion3: The key quaternion after the interval
    :param t: The interpolation parameter between 0 and 1
    :return: The interpolated quaternion
    """

    q0, q1, q2, q3 = (quaternion_normalize(q) for q in (quaternion0, quaternion1, quaternion2, quaternion3))

    control_a = _spline_intermediate(q0, q1, q2)
    control_b = _spline_intermediate(q1, q2, q3)

    return bezier(q1, control_a, control_b, q2, t)
