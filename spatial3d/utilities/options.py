"""
This module provides the options dataclass that configures the numeric behavior of the spatial types.

Options are immutable.  To change a setting, build a new instance (``dataclasses.replace`` works well) and pass it to
the operations that accept an ``options`` keyword argument::

    >>> from dataclasses import replace
    >>> from spatial3d import Rotation3D, DEFAULT_OPTIONS
    >>> loose = replace(DEFAULT_OPTIONS, relative_tolerance=1e-4)
    >>> Rotation3D().is_approximately_equal(Rotation3D(), options=loose)
    True
"""

from dataclasses import dataclass, fields
from typing import Any

from spatial3d.utilities.numerics import DEFAULT_TOLERANCE


__all__ = ['NumericOptions', 'DEFAULT_OPTIONS']


@dataclass(frozen=True)
class NumericOptions:
    """
    Tolerances and switches used by the rotation and pose operations.
    """

    relative_tolerance: float = DEFAULT_TOLERANCE
    """
    The relative tolerance used by approximate equality checks
    """

    absolute_tolerance: float = 0.0
    """
    The absolute tolerance used by approximate equality checks.  When this is 0 the checks are purely relative.
    """

    nlerp_threshold: float = 0.9995
    """
    The quaternion dot product above which spherical interpolation falls back to normalized linear interpolation
    """

    clamp_euler_pitch: bool = True
    """
    Whether the pitch term is clamped into [-1, 1] when extracting Euler angles.

    Without clamping, rotations at gimbal lock can produce a NaN pitch due to rounding.
    """

    def __post_init__(self):

        if not 0 <= self.relative_tolerance <= 1:
            raise ValueError('relative_tolerance must be in [0, 1]')

        if self.absolute_tolerance < 0:
            raise ValueError('absolute_tolerance must be non-negative')

        if not -1 <= self.nlerp_threshold <= 1:
            raise ValueError('nlerp_threshold must be in [-1, 1]')

    @property
    def options_dict(self) -> dict[str, Any]:
        """
        The options as a dictionary mapping the option name to its value.
        """

        return {field.name: getattr(self, field.name) for field in fields(self)}

    def apply_options(self, target: object) -> None:
        """
        Sets each option as an attribute of target.

        :param target: the instance that we are to update
        """

        target.__dict__.update(self.options_dict)

    def tolerances(self, relative_tolerance: float | None = None,
                   absolute_tolerance: float | None = None) -> dict[str, float | None]:
        """
        The tolerances formatted as keyword arguments for :func:`.is_approximately_equal`.

        Explicitly provided tolerances take precedence over the ones stored in the options.

        :param relative_tolerance: An override for :attr:`relative_tolerance`
        :param absolute_tolerance: An override for :attr:`absolute_tolerance`
        :return: A dictionary with the ``absolute_tolerance`` and ``relative_tolerance`` keys
        """

        if relative_tolerance is None:
            relative_tolerance = self.relative_tolerance

        if absolute_tolerance is None and self.absolute_tolerance > 0:
            absolute_tolerance = self.absolute_tolerance

        return {'absolute_tolerance': absolute_tolerance, 'relative_tolerance': relative_tolerance}


DEFAULT_OPTIONS = NumericOptions()
"""
The options used whenever none are provided
"""
