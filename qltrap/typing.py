#!/usr/bin/env python
# -*- coding:utf-8 -*-
#
# Created: 10/2026
# Author: qltrap developers
""" Define common types
"""
from typing import Union, Sequence, Tuple, Dict
import numpy as np
from numpy.typing import NDArray

Vec3 = NDArray[np.float64]
Masses = Union[float, Sequence[float], NDArray[np.float64]]
Breakpoint = Tuple[float, float]
ElectrodeVoltages = Dict[int, float]
