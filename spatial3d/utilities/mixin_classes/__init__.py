"""
This package contains helpful mixin classes to provide basic functionality throughout spatial3d.
"""

from spatial3d.utilities.mixin_classes.attribute_printing import AttributePrinting
from spatial3d.utilities.mixin_classes.transformable import (Copyable, Rotatable3D, Translatable3D, Scalable3D,
                                                             PoseApplicable3D)

__all__ = ["AttributePrinting", "Copyable", "Rotatable3D", "Translatable3D", "Scalable3D", "PoseApplicable3D"]
