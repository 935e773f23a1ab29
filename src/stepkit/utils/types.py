"""Shared typing aliases for stepkit."""

from __future__ import annotations

from typing import Callable, TypeAlias

import numpy as np
from numpy.typing import NDArray

RealFunction: TypeAlias = Callable[[float], float]
FloatArray: TypeAlias = NDArray[np.float64]
