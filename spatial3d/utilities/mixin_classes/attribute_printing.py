"""
This module provides a class implementing default __str__ and __repr__ functionality.
"""

from typing import Any, Iterator

import numpy as np


class AttributePrinting:
    """
    A mixin class that provides __str__ and __repr__ functionality.

    This mixin implements __str__ and __repr__ methods which print the class name followed by the attributes listed in
    :attr:`_printed_attributes` (which are retrieved with ``getattr`` so properties work).  If no attributes are listed
    then the instance ``__dict__`` is used instead, reporting the public property in place of any attribute that starts
    with an underscore and has one.

    Numpy arrays are printed as plain lists so that the output stays on one line.
    """

    _printed_attributes: tuple[str, ...] = ()
    """
    The names of the attributes to include in the printed representation
    """

    def _attribute_items(self) -> Iterator[tuple[str, Any]]:

        if self._printed_attributes:
            for attr in self._printed_attributes:
                yield attr, getattr(self, attr)
            return

        for attr, value in self.__dict__.items():
            if attr.startswith('_'):
                prop_name = attr.lstrip('_')
                if isinstance(getattr(self.__class__, prop_name, None), property):
                    attr = prop_name
                    value = getattr(self, prop_name)
            yield attr, value

    def _build_representation(self, attribute_repr: bool) -> str:
        """
        Implements the basic functionality of turning the class into a string including the attributes.

        :param attribute_repr: Whether to call repr on attributes instead of str.
        """

        attributes = []
        for attr, value in self._attribute_items():
            if isinstance(value, np.ndarray):
                value = value.tolist()
            elif isinstance(value, np.floating):
                value = float(value)

            if attribute_repr:
                attributes.append(f"{attr}={value!r}")
            else:
                attributes.append(f"{attr}={value}")

        return f"{self.__class__.__name__}({', '.join(attributes)})"

    def __str__(self) -> str:
        return self._build_representation(False)

    def __repr__(self) -> str:
        return self._build_representation(True)
