from typing import Union, Literal, Sequence
from datetime import datetime
from pandas import Timestamp

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = np.typing.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike

DatetimeLike = Union[datetime, Timestamp]

EULER_ORDERS = Literal['xyz', 'zxy']

F_ARRAY_LIKE = Sequence[float] | DOUBLE_ARRAY
