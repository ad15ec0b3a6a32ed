"""
This package provides utilities that are used throughout spatial3d.

The :mod:`.numerics` module contains the floating point near-equality tests, the :mod:`.options` module contains the
:class:`.NumericOptions` dataclass that configures tolerances, and the :mod:`.mixin_classes` package contains the
capability mixins shared by the geometric types.
"""

from spatial3d.utilities.numerics import DEFAULT_TOLERANCE, is_approximately_equal, is_almost_equal, is_almost_zero
from spatial3d.utilities.options import NumericOptions, DEFAULT_OPTIONS

__all__ = ['DEFAULT_TOLERANCE', 'is_approximately_equal', 'is_almost_equal', 'is_almost_zero',
           'NumericOptions', 'DEFAULT_OPTIONS']
